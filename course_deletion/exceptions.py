# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0

"""
Contains the custom exceptions used by course_deletion.
"""


class DeletionPolicyException(Exception):
    pass


class InvalidIntervalException(DeletionPolicyException):
    pass


class InvalidDateException(DeletionPolicyException):
    pass


class StagingFailedException(Exception):
    pass
