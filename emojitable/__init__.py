# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

__version__ = "1.0.0"
