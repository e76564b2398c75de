# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
pybm: turn annotated Python documents into timing reports.

A document mixes prose and named snippets. pybm parses it, wraps every
snippet into a failure-isolated timing experiment, runs the generated
script with a Python interpreter and prints one result line per snippet.
"""

__version__ = "0.3.0"
