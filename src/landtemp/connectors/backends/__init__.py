# SPDX-License-Identifier: Apache-2.0
"""Transport backends used by the dataset loader."""
