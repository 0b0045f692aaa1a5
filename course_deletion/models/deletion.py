# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0


from django.db import models
from django.utils.timezone import localtime
from course_deletion.dao.canvas import create_course
from course_deletion.policy import (
    DeletionPolicy, DeletionState, DeletionStatus)
from logging import getLogger

logger = getLogger(__name__)


class CourseDeletionManager(models.Manager):
    def get_record(self, course_id):
        try:
            return super().get_queryset().get(course_id=course_id)
        except CourseDeletion.DoesNotExist:
            return None

    def list_all(self):
        return super().get_queryset().order_by('end_date', 'pk')

    def upsert(self, state, changed_by=None):
        defaults = {
            'status': int(state.status),
            'end_date': state.end_date,
        }
        if changed_by is not None:
            defaults['changed_by'] = changed_by

        record, _ = super().get_queryset().update_or_create(
            course_id=state.course_id, defaults=defaults)
        return record

    def remove(self, course_id):
        super().get_queryset().filter(course_id=course_id).delete()

    def schedule_course(self, course_id, now=None, policy=None):
        if policy is None:
            policy = DeletionPolicy.from_settings()

        state = policy.new_state(course_id, now)
        record, created = super().get_queryset().get_or_create(
            course_id=course_id, defaults={
                'status': int(state.status),
                'end_date': state.end_date,
            })

        if created:
            logger.info(f'SCHEDULE course {course_id}, '
                        f'end date: {localtime(record.end_date).date()}')
        return record

    def create_course(self, account_id, name, policy=None):
        canvas_course = create_course(account_id, name)
        return self.schedule_course(str(canvas_course.course_id),
                                    policy=policy)


class CourseDeletion(models.Model):
    """ Represents the deletion workflow state of a Canvas course.
    """
    STATUS_CHOICES = tuple(
        (status.value, status.label) for status in DeletionStatus)

    course_id = models.CharField(max_length=20, unique=True)
    status = models.SmallIntegerField(
        default=DeletionStatus.SCHEDULED.value, choices=STATUS_CHOICES)
    end_date = models.DateTimeField()
    created_date = models.DateTimeField(auto_now_add=True)
    updated_date = models.DateTimeField(auto_now=True)
    changed_by = models.CharField(max_length=32, null=True)

    objects = CourseDeletionManager()

    @property
    def state(self):
        return DeletionState(self.course_id, DeletionStatus(self.status),
                             self.end_date)

    def is_scheduled(self):
        return self.status != DeletionStatus.NOT_SCHEDULED

    def json_data(self, policy=None):
        if policy is None:
            policy = DeletionPolicy.from_settings()

        state = self.state
        staged_date = None
        if state.status in (DeletionStatus.SCHEDULED,
                            DeletionStatus.SCHEDULED_NOTIFIED):
            staged_date = policy.date_course_will_be_staged_for_deletion(
                state.end_date, state.status)
        deleted_date = policy.date_course_will_be_deleted(state)

        return {
            'course_id': self.course_id,
            'status': state.status.label,
            'schedule_deletion': self.is_scheduled(),
            'end_date': localtime(self.end_date).isoformat() if (
                self.end_date is not None) else None,
            'staged_for_deletion_date': localtime(
                staged_date).isoformat() if (
                    staged_date is not None) else None,
            'deletion_date': localtime(deleted_date).isoformat() if (
                deleted_date is not None) else None,
            'created_date': localtime(self.created_date).isoformat() if (
                self.created_date is not None) else None,
            'updated_date': localtime(self.updated_date).isoformat() if (
                self.updated_date is not None) else None,
            'changed_by': self.changed_by,
        }
