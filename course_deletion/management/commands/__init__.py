# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0

from django.core.management.base import BaseCommand
from django.core.mail import mail_admins
from django.utils.timezone import now
from course_deletion.models import Job
from datetime import timedelta
from logging import getLogger

logger = getLogger(__name__)


class CourseDeletionCommand(BaseCommand):
    """ A command that runs only while its Job is active.  Jobs are created
        inactive the first time their command is seen.
    """
    def execute(self, *args, **options):
        if not self.is_active_job():
            logger.info(f'Job "{self.job_name()}" is not active')
            return
        return super().execute(*args, **options)

    def job_name(self):
        return self.__module__.split('.')[-1]

    def title_from_name(self, name):
        return ' '.join(w.capitalize() for w in name.split('_'))

    def is_active_job(self):
        name = self.job_name()
        try:
            job = Job.objects.get(name=name)
        except Job.DoesNotExist:
            job = Job(name=name,
                      title=self.title_from_name(name),
                      is_active=False,
                      changed_date=now())
            job.save()

        return True if job.is_active else False

    def update_job(self):
        job = Job.objects.get(name=self.job_name())
        job.last_run_date = now()
        job.save()

    def squawk(self, message='Problem with Course Deletion Job'):
        job = Job.objects.get(name=self.job_name())
        job.health_status = message
        if (not job.last_status_date or
                (now() - job.last_status_date) > timedelta(hours=1)):
            mail_admins(
                'Course deletion job "{}" may be having issues'.format(
                    job.title), message, fail_silently=True)
            job.last_status_date = now()

        job.save()
