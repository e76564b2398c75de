# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Benchmark harness generation.

Subsystems:
  - runtime: helper library embedded verbatim into every generated script
  - stats: the outlier-trimming statistics engine, callable in-process
  - report: result-line formatting, callable in-process
  - wrapper: turns snippets into timed, failure-isolated script blocks
"""
