# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0


from django.core import mail
from django.test import TestCase, override_settings
from django.utils.timezone import get_current_timezone
from course_deletion.dao.mail import recipients_for_course, send_notification
from course_deletion.policy import MailKind
from datetime import datetime
import mock


@override_settings(COURSE_DELETION_EMAIL_DOMAIN='uw.edu',
                   COURSE_DELETION_MAIL_FROM='canvas-noreply@uw.edu')
@mock.patch('course_deletion.dao.mail.get_teacher_login_ids')
class NotificationMailTest(TestCase):
    def test_recipients_for_course(self, mock_teachers):
        mock_teachers.return_value = ['javerage', 'bill@example.edu']
        self.assertEqual(recipients_for_course('123'),
                         ['javerage@uw.edu', 'bill@example.edu'])
        mock_teachers.assert_called_with('123')

    def test_will_be_staged_for_deletion(self, mock_teachers):
        mock_teachers.return_value = ['javerage']
        end_date = datetime(2025, 11, 30, tzinfo=get_current_timezone())

        sent = send_notification(
            MailKind.WILL_BE_STAGED_FOR_DELETION, '123', end_date=end_date)
        self.assertEqual(sent, 1)
        self.assertEqual(len(mail.outbox), 1)

        message = mail.outbox[0]
        self.assertEqual(message.to, ['javerage@uw.edu'])
        self.assertEqual(message.from_email, 'canvas-noreply@uw.edu')
        self.assertEqual(
            message.subject, 'Canvas course 123 will be moved to the trash')
        self.assertIn('on 2025-11-30', message.body)

    def test_will_be_deleted_soon(self, mock_teachers):
        mock_teachers.return_value = ['javerage', 'bill']

        sent = send_notification('mail_will_be_deleted_soon', '123')
        self.assertEqual(sent, 1)
        self.assertEqual(mail.outbox[0].to,
                         ['javerage@uw.edu', 'bill@uw.edu'])
        self.assertEqual(mail.outbox[0].subject,
                         'Canvas course 123 will be deleted')
        self.assertIn('a future date', mail.outbox[0].body)

    def test_no_recipients(self, mock_teachers):
        mock_teachers.return_value = []
        sent = send_notification(MailKind.WILL_BE_DELETED_SOON, '123')
        self.assertEqual(sent, 0)
        self.assertEqual(len(mail.outbox), 0)
