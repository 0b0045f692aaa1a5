# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0

from django.conf import settings
from django.http import HttpResponse
from django.views import View
from uw_saml.utils import get_user, is_member_of_group
import json


def can_manage_course_deletions(request):
    return is_member_of_group(
        request, getattr(settings, 'COURSE_DELETION_ADMIN_GROUP', None))


class OpenRESTDispatch(View):
    @staticmethod
    def error_response(status, message='', content={}):
        content = dict(content)
        content['error'] = '{}'.format(message)
        return HttpResponse(json.dumps(content),
                            status=status,
                            content_type='application/json')

    @staticmethod
    def json_response(content='', status=200):
        return HttpResponse(json.dumps(content, sort_keys=True),
                            status=status,
                            content_type='application/json')

    @staticmethod
    def user(request):
        return get_user(request)
