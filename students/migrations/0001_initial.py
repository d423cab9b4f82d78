import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Admin',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('email', models.CharField(max_length=255, unique=True)),
                ('password_hash', models.CharField(max_length=255)),
            ],
            options={
                'db_table': 'admins',
            },
        ),
        migrations.CreateModel(
            name='AuditEvent',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('principal_kind', models.CharField(blank=True, choices=[('student', 'Student'), ('admin', 'Admin')], max_length=10)),
                ('principal_id', models.IntegerField(blank=True, null=True)),
                ('action', models.CharField(max_length=64)),
                ('detail', models.JSONField(blank=True, default=dict)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'audit_events',
                'indexes': [
                    models.Index(fields=['action', 'created_at'], name='audit_action_created_idx'),
                    models.Index(fields=['principal_kind', 'principal_id', 'created_at'], name='audit_principal_created_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='CodingTestScore',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('student_id', models.IntegerField(db_index=True)),
                ('score', models.FloatField()),
                ('date', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'db_table': 'coding_test_scores',
            },
        ),
        migrations.CreateModel(
            name='Project',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('student_id', models.IntegerField(db_index=True)),
                ('project_name', models.CharField(max_length=255)),
                ('description', models.CharField(blank=True, max_length=1024, null=True)),
            ],
            options={
                'db_table': 'projects',
            },
        ),
        migrations.CreateModel(
            name='Student',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('full_name', models.CharField(max_length=255)),
                ('email', models.CharField(max_length=255, unique=True)),
                ('password_hash', models.CharField(max_length=255)),
                ('phone_number', models.CharField(max_length=64)),
                ('parent_contact', models.CharField(max_length=255)),
                ('dob', models.DateField()),
                ('high_school', models.CharField(max_length=255)),
                ('expression_of_interest_date', models.DateTimeField(default=django.utils.timezone.now)),
                ('psychometric_scores', models.CharField(blank=True, max_length=255, null=True)),
                ('skill_rating', models.FloatField(blank=True, null=True)),
                ('reported_income', models.FloatField(blank=True, null=True)),
            ],
            options={
                'db_table': 'students',
            },
        ),
    ]
