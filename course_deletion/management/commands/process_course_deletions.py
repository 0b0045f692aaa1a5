# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0


from course_deletion.management.commands import CourseDeletionCommand
from course_deletion.workflow import CourseDeletionWorkflow
from logging import getLogger

logger = getLogger(__name__)


class Command(CourseDeletionCommand):
    help = 'Advance courses through the deletion workflow.'

    def add_arguments(self, parser):
        parser.add_argument('-c', '--commit', action='store_true',
                            dest='commit', default=False,
                            help='Apply transitions, otherwise only log them')

    def handle(self, *args, **options):
        commit = options.get('commit')
        summary = CourseDeletionWorkflow().run(commit=commit)

        if summary['failed']:
            self.squawk(f'{summary["failed"]} course deletion records '
                        'could not be processed')

        self.update_job()
