# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0

from django.conf import settings
from django.core.mail import send_mail
from django.utils.timezone import localtime
from course_deletion.dao.canvas import get_teacher_login_ids
from course_deletion.policy import MailKind
from logging import getLogger

logger = getLogger(__name__)

MESSAGES = {
    MailKind.WILL_BE_STAGED_FOR_DELETION: (
        'Canvas course {course_id} will be moved to the trash',
        'Canvas course {course_id} is scheduled to be moved to the trash '
        'on {date}.  Courses in the trash are deleted after a waiting '
        'period.  To keep the course, change its deletion date before '
        'then.'),
    MailKind.WILL_BE_DELETED_SOON: (
        'Canvas course {course_id} will be deleted',
        'Canvas course {course_id} is in the trash and will be permanently '
        'deleted on {date}.'),
}


def recipients_for_course(course_id):
    domain = getattr(settings, 'COURSE_DELETION_EMAIL_DOMAIN', 'uw.edu')
    return [login_id if '@' in login_id else f'{login_id}@{domain}'
            for login_id in get_teacher_login_ids(course_id)]


def send_notification(mail_kind, course_id, end_date=None):
    """ Mails the teachers of the course, returns the number of messages
        sent.
    """
    recipients = recipients_for_course(course_id)
    if not len(recipients):
        logger.info(f'MAIL {MailKind(mail_kind).value} course {course_id}: '
                    'no recipients')
        return 0

    subject, body = MESSAGES[MailKind(mail_kind)]
    date = localtime(end_date).date().isoformat() if (
        end_date is not None) else 'a future date'
    sent = send_mail(
        subject.format(course_id=course_id),
        body.format(course_id=course_id, date=date),
        getattr(settings, 'COURSE_DELETION_MAIL_FROM', None),
        recipients)

    logger.info(f'MAIL {MailKind(mail_kind).value} course {course_id} '
                f'to {", ".join(recipients)}')
    return sent
