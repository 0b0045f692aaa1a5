# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0


from django.db import transaction, DatabaseError
from django.utils.timezone import now as current_time, localtime
from course_deletion.dao import canvas
from course_deletion.dao.mail import send_notification
from course_deletion.exceptions import StagingFailedException
from course_deletion.models import CourseDeletion
from course_deletion.policy import (
    DeletionPolicy, DeletionStatus, Action)
from restclients_core.exceptions import DataFailureException
from prometheus_client import Counter
from smtplib import SMTPException
from logging import getLogger

logger = getLogger(__name__)
prometheus_course_deletion = Counter(
    'course_deletion_transition_count',
    'Course Deletion Transition Counter',
    ['action'])

COLLABORATOR_ERRORS = (
    DataFailureException, SMTPException, DatabaseError,
    StagingFailedException)

# notify, stage, delete, plus one reset
MAX_TRANSITIONS = 4


class CourseDeletionWorkflow(object):
    """ Applies DeletionPolicy decisions.  The record store, the Canvas
        course lifecycle, the notifier and the clock are injected; the
        defaults are the CourseDeletion manager, the Canvas dao, the mail
        dao and django's timezone-aware now().
    """
    def __init__(self, policy=None, store=None, lifecycle=None,
                 notifier=None, clock=None):
        self.policy = DeletionPolicy.from_settings() if (
            policy is None) else policy
        self.store = CourseDeletion.objects if store is None else store
        self.lifecycle = canvas if lifecycle is None else lifecycle
        self.notifier = send_notification if notifier is None else notifier
        self.clock = current_time if clock is None else clock

    def run(self, commit=True):
        """ Processes every deletion record.  A failure on one course is
            logged and counted, the remaining courses are still processed.
        """
        now = self.clock()
        summary = dict((action.value, 0) for action in Action if (
            action != Action.NONE))
        summary['failed'] = 0

        for record in list(self.store.list_all()):
            try:
                for transition in self.process(record.state, now, commit):
                    summary[transition.action.value] += 1

            except COLLABORATOR_ERRORS as ex:
                summary['failed'] += 1
                logger.error(f'PROCESS course {record.course_id} '
                             f'failed: {ex}')

        logger.info('PROCESS course deletions (Commit={}): {}'.format(
            commit, ', '.join(f'{k}={v}' for k, v in summary.items())))
        return summary

    def process(self, state, now=None, commit=True):
        """ Advances one course until no further transition is due and
            returns the transitions applied.  Without commit, only the
            first due transition is reported.
        """
        if now is None:
            now = self.clock()

        applied = []
        while state is not None and len(applied) < MAX_TRANSITIONS:
            in_staging_area = self.in_staging_area(state)
            transition = self.policy.next_transition(
                state, now, in_staging_area=bool(in_staging_area),
                course_exists=in_staging_area is not None)
            if not transition.is_due:
                break

            if commit:
                self.apply(state, transition)

            logger.info(
                f'{transition.action.value.upper()} course '
                f'{state.course_id} (Commit={commit}), '
                f'{state.status.label} -> ' + (
                    f'{transition.state.status.label}, end date: '
                    f'{localtime(transition.state.end_date).date()}' if (
                        transition.state is not None) else 'deleted'))

            applied.append(transition)
            if not commit:
                break
            state = transition.state

        return applied

    def in_staging_area(self, state):
        """ Returns None when a staged course no longer exists in Canvas.
        """
        if state.status != DeletionStatus.STAGED_FOR_DELETION:
            return False
        try:
            return self.lifecycle.is_course_in_staging_area(state.course_id)
        except DataFailureException as ex:
            if ex.status == 404:
                return None
            raise

    def apply(self, state, transition):
        """ Applies a transition and its side effect together: the Canvas
            change or mail happens inside the record transaction, so a
            failure leaves the record as it was.
        """
        course_id = state.course_id
        with transaction.atomic():
            if transition.action == Action.STAGE:
                if not self.lifecycle.move_course_to_staging_area(course_id):
                    raise StagingFailedException(
                        f'Unable to move course {course_id} to the trash')

            if transition.action == Action.DELETE:
                self.delete_course(course_id)
                self.store.remove(course_id)
            else:
                self.store.upsert(transition.state)

            if transition.trigger_mail is not None:
                self.notifier(transition.trigger_mail, course_id,
                              end_date=transition.state.end_date)

        prometheus_course_deletion.labels(transition.action.value).inc()

    def delete_course(self, course_id):
        try:
            self.lifecycle.delete_course(course_id)
        except DataFailureException as ex:
            if ex.status != 404:
                raise
            logger.info(f'DELETE course {course_id}: already deleted')

    def update_from_request(self, course_id, requested_end_date,
                            schedule_enabled=True, changed_by=None):
        """ Applies a user-requested deletion date change.  Returns the
            stored record and the UpdateResult, whose minimum_date_forced
            tells the caller the requested date was not accepted as given.
        """
        record = self.store.get_record(course_id)
        if record is None:
            raise CourseDeletion.DoesNotExist(
                f'No deletion record for course {course_id}')

        result = self.policy.update_from_request(
            record.state, requested_end_date, self.clock(),
            schedule_enabled=schedule_enabled)

        if result.state != record.state:
            with transaction.atomic():
                record = self.store.upsert(result.state, changed_by=changed_by)
                if result.trigger_mail is not None:
                    self.notifier(result.trigger_mail, course_id,
                                  end_date=result.state.end_date)

        if result.minimum_date_forced is not None:
            logger.info(f'UPDATE course {course_id} by {changed_by}: '
                        'minimum date forced '
                        f'{localtime(result.minimum_date_forced).date()}')

        logger.info(f'UPDATE course {course_id} by {changed_by}: '
                    f'{result.state.status.label}, end date: '
                    f'{localtime(result.state.end_date).date()}')
        return record, result
