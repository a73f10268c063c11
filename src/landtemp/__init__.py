# SPDX-License-Identifier: Apache-2.0
"""Monthly global land-surface temperature heat map."""

__version__ = "0.3.0"
