# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: classbook
"""
classbook: validated value objects and input parsing for a tutor's records
of people, tasks, sessions and graded tests.
"""

__version__ = "0.1.0"
