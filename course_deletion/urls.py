# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0

from django.urls import re_path
from course_deletion.views.deletion import CourseDeletionView

urlpatterns = [
    re_path(r'^api/v1/course/(?P<course_id>[^/]+)/deletion$',
            CourseDeletionView.as_view(), name='CourseDeletion'),
]
