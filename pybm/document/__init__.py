# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Annotated document handling.

A benchmark document is a Python file with `#@bench <name>` markers. Every
marker opens a named snippet that collects the code below it; everything
else is passed through untouched.

Subsystems:
  - grammar.lark: the document grammar
  - tokenizer: lark-based tokenization into declaration/content tokens
  - parser: folding tokens into the ordered Content/Snippet item list
  - listing: printing the measured code of every snippet
"""
