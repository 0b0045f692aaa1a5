# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0

from django.conf import settings
from uw_canvas.courses import Courses
from uw_canvas.enrollments import Enrollments
from uw_canvas.models import CanvasCourse
from restclients_core.exceptions import DataFailureException
from logging import getLogger

logger = getLogger(__name__)

COURSES_API = '/api/v1/courses/{}'
TEACHER_ENROLLMENT = 'TeacherEnrollment'


class DeletionCourses(Courses):
    def delete_course(self, course_id):
        """ Canvas API: DELETE /api/v1/courses/:id
        """
        url = COURSES_API.format(course_id) + '?event=delete'
        return self._delete_resource(url)

    def update_account(self, course_id, account_id):
        """ Canvas API: PUT /api/v1/courses/:id
        """
        url = COURSES_API.format(course_id)
        body = {'course': {'account_id': account_id}}
        return CanvasCourse(data=self._put_resource(url, body))


def staging_account_id():
    return str(getattr(settings, 'COURSE_DELETION_STAGING_ACCOUNT_ID'))


def get_course_by_id(course_id):
    return DeletionCourses().get_course(course_id)


def create_course(account_id, name):
    return DeletionCourses().create_course(account_id, name)


def delete_course(course_id):
    DeletionCourses().delete_course(course_id)
    logger.info(f'DELETE course {course_id}')


def is_course_in_staging_area(course_id):
    course = get_course_by_id(course_id)
    return str(course.account_id) == staging_account_id()


def move_course_to_staging_area(course_id):
    account_id = staging_account_id()
    try:
        course = DeletionCourses().update_account(course_id, account_id)
    except DataFailureException as ex:
        logger.error(f'MOVE course {course_id} to account {account_id} '
                     f'failed: {ex}')
        return False

    logger.info(f'MOVE course {course_id} to account {account_id}')
    return str(course.account_id) == account_id


def get_teacher_login_ids(course_id):
    enrollments = Enrollments(per_page=100).get_enrollments_for_course(
        course_id, params={'type': [TEACHER_ENROLLMENT], 'state': ['active']})
    return sorted(set(e.login_id for e in enrollments if e.login_id))
