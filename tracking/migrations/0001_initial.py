import django.utils.timezone
import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='ButtonClick',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('button_type', models.TextField(db_index=True, help_text='Kind of element clicked (call, email, whatsapp, website, social, ...)')),
                ('button_label', models.TextField(help_text='Button text or social platform name')),
                ('clicked_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now, editable=False)),
                ('ip_address', models.TextField(blank=True, null=True)),
                ('user_agent', models.TextField(blank=True, null=True)),
                ('metadata', models.JSONField(blank=True, help_text='Additional data such as the target URL', null=True)),
            ],
            options={
                'db_table': 'button_clicks',
                'ordering': ['-clicked_at'],
                'indexes': [models.Index(fields=['button_type', 'button_label'], name='button_clic_button__2a9d41_idx')],
            },
        ),
    ]
