# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0


from django.utils.timezone import localtime
from course_deletion.dates import parse_request_date
from course_deletion.exceptions import InvalidDateException
from course_deletion.models import CourseDeletion
from course_deletion.views import OpenRESTDispatch, can_manage_course_deletions
from course_deletion.workflow import (
    CourseDeletionWorkflow, COLLABORATOR_ERRORS)
from logging import getLogger
import json

logger = getLogger(__name__)


class CourseDeletionView(OpenRESTDispatch):
    """ API for the deletion schedule of a course at
          /api/v1/course/<course id>/deletion.
        Public GET returns 200 with the course deletion record.
        Authenticated PUT updates the deletion date, or turns
        scheduled deletion off and on.
    """
    def get(self, request, *args, **kwargs):
        course_id = kwargs['course_id'].strip()
        try:
            record = CourseDeletion.objects.get(course_id=course_id)
        except CourseDeletion.DoesNotExist:
            return self.error_response(404, 'Course not found')

        return self.json_response(record.json_data())

    def put(self, request, *args, **kwargs):
        login_name = self.user(request)
        if not (login_name and can_manage_course_deletions(request)):
            return self.error_response(401, 'Not permitted')

        course_id = kwargs['course_id'].strip()
        try:
            put_data = json.loads(request.body)
            schedule_enabled = put_data.get('schedule_deletion', True)
            if not isinstance(schedule_enabled, bool):
                raise ValueError('schedule_deletion must be true or false')
            requested = put_data.get('deletion_date')
            if requested is not None:
                requested = parse_request_date(requested)
        except (ValueError, AttributeError, InvalidDateException) as ex:
            return self.error_response(400, 'Invalid request: {}'.format(ex))

        try:
            record, result = CourseDeletionWorkflow().update_from_request(
                course_id, requested, schedule_enabled=schedule_enabled,
                changed_by=login_name)

        except CourseDeletion.DoesNotExist:
            return self.error_response(404, 'Course not found')
        except COLLABORATOR_ERRORS as ex:
            logger.error(f'UPDATE course {course_id} failed: {ex}')
            return self.error_response(500, 'Update failed: {}'.format(ex))

        data = record.json_data()
        data['minimum_date_forced'] = localtime(
            result.minimum_date_forced).isoformat() if (
                result.minimum_date_forced is not None) else None
        data['trigger_mail'] = result.trigger_mail.value if (
            result.trigger_mail is not None) else None
        return self.json_response(data)
