from django.db import migrations, models

import projects.models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Project',
            fields=[
                ('id', models.CharField(default=projects.models.generate_project_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ('harvest_id', models.CharField(blank=True, max_length=64, null=True, unique=True)),
                ('name', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True)),
                ('start_date', models.DateField()),
                ('end_date', models.DateField()),
                ('industry', models.CharField(choices=[('Technology', 'Technology'), ('Healthcare', 'Healthcare'), ('Financial Services', 'Financial Services'), ('Manufacturing', 'Manufacturing'), ('Retail', 'Retail'), ('Energy', 'Energy'), ('Education', 'Education'), ('Telecommunications', 'Telecommunications'), ('Other', 'Other')], default='Other', max_length=32)),
                ('project_type', models.CharField(choices=[('Align and activate', 'Align and activate'), ('Right-sizing', 'Right-sizing'), ('PMI', 'PMI'), ('Org DD', 'Org DD'), ('TOM implementation', 'TOM implementation'), ('Other', 'Other')], default='Other', max_length=32)),
                ('tools', models.JSONField(blank=True, default=projects.models.default_tools)),
                ('days_worked', models.PositiveIntegerField(blank=True, null=True)),
                ('total_hours', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('team_members', models.JSONField(blank=True, default=list)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Project',
                'verbose_name_plural': 'Projects',
                'ordering': ['name'],
                'indexes': [models.Index(fields=['start_date', 'end_date'], name='project_dates_idx')],
            },
        ),
    ]
