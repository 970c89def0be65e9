# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only


class ConfigurationError(ValueError):
    """A suite, curve or expander was set up outside its allowed parameters."""
