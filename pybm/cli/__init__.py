# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Command-line interface: the `pybm` root command and its subcommands."""
