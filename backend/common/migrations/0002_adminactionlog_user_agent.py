from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('common', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='adminactionlog',
            name='user_agent',
            field=models.TextField(blank=True),
        ),
    ]
