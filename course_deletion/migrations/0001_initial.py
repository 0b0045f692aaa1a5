# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0

from django.db import models, migrations


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Job',
            fields=[
                ('id', models.AutoField(verbose_name='ID', serialize=False, auto_created=True, primary_key=True)),
                ('name', models.CharField(max_length=128, unique=True)),
                ('title', models.CharField(max_length=128)),
                ('changed_by', models.CharField(max_length=32, null=True)),
                ('changed_date', models.DateTimeField()),
                ('last_run_date', models.DateTimeField(null=True)),
                ('is_active', models.BooleanField(null=True)),
                ('health_status', models.CharField(max_length=512, null=True)),
                ('last_status_date', models.DateTimeField(null=True)),
            ],
        ),
        migrations.CreateModel(
            name='CourseDeletion',
            fields=[
                ('id', models.AutoField(verbose_name='ID', serialize=False, auto_created=True, primary_key=True)),
                ('course_id', models.CharField(max_length=20, unique=True)),
                ('status', models.SmallIntegerField(default=1, choices=[(0, 'not_scheduled'), (1, 'scheduled'), (2, 'scheduled_notified'), (3, 'staged_for_deletion')])),
                ('end_date', models.DateTimeField()),
                ('created_date', models.DateTimeField(auto_now_add=True)),
                ('updated_date', models.DateTimeField(auto_now=True)),
                ('changed_by', models.CharField(max_length=32, null=True)),
            ],
        ),
    ]
