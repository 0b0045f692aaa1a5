#!/usr/bin/env python

import os
from setuptools import setup, find_packages

README = """
See the README on `GitHub
<https://github.com/uw-it-aca/canvas-course-deletion>`_.
"""

version_path = 'course_deletion/VERSION'
VERSION = open(os.path.join(os.path.dirname(__file__), version_path)).read()
VERSION = VERSION.replace("\n", "")

# allow setup.py to be run from any path
os.chdir(os.path.normpath(os.path.join(os.path.abspath(__file__), os.pardir)))

setup(
    name='Canvas Course Deletion',
    version=VERSION,
    packages=find_packages(include=['course_deletion', 'course_deletion.*']),
    include_package_data=True,
    install_requires=[
        'django~=5.2',
        'python-dateutil',
        'uw-restclients-core~=1.4',
        'uw-restclients-canvas~=1.2',
        'uw-django-saml2~=1.8',
        'prometheus-client>=0.7,<1.0',
    ],
    extras_require={
        'test': ['mock', 'pytest', 'pytest-django'],
    },
    license='Apache License, Version 2.0',
    description='Stages and deletes expired Canvas courses',
    long_description=README,
    url='https://github.com/uw-it-aca/canvas-course-deletion',
    author="UW-IT Student & Educational Technology Services",
    author_email="aca-it@uw.edu",
    classifiers=[
        'Environment :: Web Environment',
        'Framework :: Django',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
    ],
)
