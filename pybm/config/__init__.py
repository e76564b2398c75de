# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""YAML configuration: schema models and the loader."""
