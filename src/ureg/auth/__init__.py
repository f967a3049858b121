# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Password helpers.

This package provides:
- Password hashing/verification (argon2, fixed cost factor)
"""
