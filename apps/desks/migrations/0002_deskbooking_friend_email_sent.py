from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('desks', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='deskbooking',
            name='friend_email_sent',
            field=models.BooleanField(default=False),
        ),
    ]
