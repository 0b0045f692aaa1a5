# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0


from django.core.management.base import BaseCommand, CommandError
from course_deletion.dao.canvas import get_course_by_id
from course_deletion.models import CourseDeletion
from restclients_core.exceptions import DataFailureException
from logging import getLogger

logger = getLogger(__name__)


class Command(BaseCommand):
    help = 'Add existing Canvas courses to the deletion workflow.'

    def add_arguments(self, parser):
        parser.add_argument('course_id', nargs='+', help='Canvas course ID')

    def handle(self, *args, **options):
        for course_id in options['course_id']:
            try:
                get_course_by_id(course_id)
            except DataFailureException as ex:
                raise CommandError(f'Course {course_id}: {ex}')

            record = CourseDeletion.objects.schedule_course(course_id)
            self.stdout.write('{}: {}, {}'.format(
                course_id, record.state.status.label, record.end_date))
