# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0

from django.db import models


class Job(models.Model):
    """ Represents a course deletion management command.
    """
    name = models.CharField(max_length=128, unique=True)
    title = models.CharField(max_length=128)
    changed_by = models.CharField(max_length=32, null=True)
    changed_date = models.DateTimeField()
    last_run_date = models.DateTimeField(null=True)
    is_active = models.BooleanField(null=True)
    health_status = models.CharField(max_length=512, null=True)
    last_status_date = models.DateTimeField(null=True)


from course_deletion.models.deletion import CourseDeletion  # noqa
