# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0


from django.apps import AppConfig


class CourseDeletionConfig(AppConfig):
    name = 'course_deletion'
    default_auto_field = 'django.db.models.AutoField'
