# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Execution host.

Subsystems:
  - artifact: placement and cleanup of generated scripts
  - host: runtime probing and streaming script execution
"""
