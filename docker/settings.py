import os

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

SECRET_KEY = os.getenv('DJANGO_SECRET', 'course-deletion-localdev')
ALLOWED_HOSTS = ['*']

INSTALLED_APPS = [
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'course_deletion.apps.CourseDeletionConfig',
]

MIDDLEWARE = [
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
]

ROOT_URLCONF = 'docker.urls'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.getenv(
            'DATABASE_NAME', os.path.join(BASE_DIR, 'db.sqlite3')),
    }
}

USE_TZ = True
TIME_ZONE = 'America/Los_Angeles'

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'course_deletion': {
            'format': '%(levelname)-4s %(asctime)s %(name)s %(message)s',
        },
    },
    'handlers': {
        'stdout': {
            'class': 'logging.StreamHandler',
            'formatter': 'course_deletion',
        },
        'null': {
            'class': 'logging.NullHandler',
        },
    },
    'loggers': {
        'course_deletion': {
            'handlers': ['null' if os.getenv('ENV') == 'test' else 'stdout'],
            'level': os.getenv('LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
    },
}

EMAIL_BACKEND = os.getenv(
    'EMAIL_BACKEND', 'django.core.mail.backends.console.EmailBackend')
DEFAULT_FROM_EMAIL = os.getenv('EMAIL_FROM', 'canvas-noreply@uw.edu')

COURSE_DELETION_INTERVAL_UNTIL_STAGING = os.getenv(
    'INTERVAL_UNTIL_STAGING', '3 weeks')
COURSE_DELETION_INTERVAL_BEFORE_DELETION = os.getenv(
    'INTERVAL_BEFORE_DELETION', '1 month')
COURSE_DELETION_DEFAULT_LEAD_TIME = os.getenv('DEFAULT_LEAD_TIME', '1 year')
COURSE_DELETION_AUTO_DELETE = os.getenv('AUTO_DELETE', '') == 'true'
COURSE_DELETION_STAGING_ACCOUNT_ID = os.getenv('STAGING_ACCOUNT_ID', '98765')
COURSE_DELETION_EMAIL_DOMAIN = os.getenv('EMAIL_DOMAIN', 'uw.edu')
COURSE_DELETION_MAIL_FROM = DEFAULT_FROM_EMAIL

if os.getenv('ENV', 'localdev') in ('localdev', 'test'):
    DEBUG = True
    COURSE_DELETION_ADMIN_GROUP = 'u_test_group'
    RESTCLIENTS_CANVAS_DAO_CLASS = 'Mock'
    RESTCLIENTS_CANVAS_ACCOUNT_ID = '12345'
    MOCK_SAML_ATTRIBUTES = {
        'uwnetid': ['javerage'],
        'isMemberOf': ['u_test_group'],
    }
else:
    DEBUG = False
    COURSE_DELETION_ADMIN_GROUP = os.getenv('ADMIN_GROUP', '')
    RESTCLIENTS_CANVAS_DAO_CLASS = 'Live'
    RESTCLIENTS_CANVAS_HOST = os.getenv('CANVAS_HOST', '')
    RESTCLIENTS_CANVAS_OAUTH_BEARER = os.getenv('CANVAS_OAUTH_BEARER', '')
    RESTCLIENTS_CANVAS_ACCOUNT_ID = os.getenv('CANVAS_ACCOUNT_ID', '')
