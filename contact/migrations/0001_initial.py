import django.utils.timezone
import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='ContactSubmission',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.TextField(help_text='Name of the person contacting us')),
                ('email', models.TextField(help_text='Email address for follow-up')),
                ('phone', models.TextField(blank=True, help_text='Optional phone number', null=True)),
                ('service', models.TextField(help_text='Service the customer is interested in')),
                ('message', models.TextField(help_text='The message content')),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now, editable=False, help_text='When the submission was received')),
                ('user_agent', models.TextField(blank=True, help_text='Browser user agent of the submitter', null=True)),
                ('ip', models.TextField(blank=True, help_text='IP address of the submitter', null=True)),
                ('addressed', models.BooleanField(db_index=True, default=False, help_text='Whether a staff member has handled this submission')),
            ],
            options={
                'verbose_name': 'Contact Submission',
                'verbose_name_plural': 'Contact Submissions',
                'db_table': 'contact_submissions',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['addressed', 'created_at'], name='contact_sub_address_6c1f0e_idx')],
            },
        ),
    ]
