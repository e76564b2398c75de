# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Startup checks and bootstrap."""
