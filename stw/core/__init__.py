# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
The normalization core of stw.

Two pieces that never talk to each other:
  - selector: which files under a root get visited (knows paths, not content)
  - normalizer: what a file's bytes become (knows content, not paths)

The pipeline package is what wires them to the filesystem.
"""
