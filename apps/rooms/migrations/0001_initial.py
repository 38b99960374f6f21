from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='MeetingRoom',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('room_number', models.CharField(max_length=50, unique=True)),
                ('room_name', models.CharField(max_length=100)),
                ('capacity', models.PositiveIntegerField(default=0)),
                ('has_projector', models.BooleanField(default=False)),
                ('has_video_conference', models.BooleanField(default=False)),
                ('status', models.CharField(choices=[('VACANT', 'Vacant'), ('BOOKED', 'Booked')], default='VACANT', max_length=10)),
            ],
            options={
                'ordering': ['room_number'],
            },
        ),
        migrations.CreateModel(
            name='MeetingRoomBooking',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('booker_name', models.CharField(max_length=100)),
                ('designation', models.CharField(max_length=50)),
                ('contact', models.CharField(max_length=20)),
                ('email', models.EmailField(max_length=50)),
                ('booking_date', models.DateField()),
                ('start_time', models.TimeField()),
                ('end_time', models.TimeField()),
                ('email_sent', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('meeting_room', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='bookings', to='rooms.meetingroom')),
            ],
            options={
                'ordering': ['-booking_date', 'start_time'],
                'indexes': [
                    models.Index(fields=['meeting_room', 'booking_date'], name='room_booking_room_date_idx'),
                    models.Index(fields=['email'], name='room_booking_email_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(end_time__gt=models.F('start_time')), name='room_booking_valid_times'),
                ],
            },
        ),
    ]
