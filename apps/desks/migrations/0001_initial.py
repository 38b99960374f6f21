from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Desk',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('desk_number', models.CharField(max_length=50, unique=True)),
                ('department', models.CharField(blank=True, max_length=50)),
                ('x_position', models.IntegerField(blank=True, null=True)),
                ('y_position', models.IntegerField(blank=True, null=True)),
                ('floor', models.IntegerField(blank=True, null=True)),
                ('status', models.CharField(choices=[('VACANT', 'Vacant'), ('BOOKED', 'Booked')], default='VACANT', max_length=10)),
                ('occupant_name', models.CharField(blank=True, max_length=100, null=True)),
                ('occupant_department', models.CharField(blank=True, max_length=50, null=True)),
            ],
            options={
                'ordering': ['floor', 'desk_number'],
                'indexes': [models.Index(fields=['status', 'department'], name='desk_status_department_idx')],
            },
        ),
        migrations.CreateModel(
            name='DeskBooking',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('booker_name', models.CharField(max_length=100)),
                ('department', models.CharField(max_length=50)),
                ('designation', models.CharField(max_length=50)),
                ('contact', models.CharField(max_length=20)),
                ('email', models.EmailField(max_length=50)),
                ('is_for_friend', models.BooleanField(default=False)),
                ('friend_name', models.CharField(blank=True, max_length=100)),
                ('friend_email', models.EmailField(blank=True, max_length=50)),
                ('booking_date', models.DateField()),
                ('email_sent', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('desk', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='bookings', to='desks.desk')),
            ],
            options={
                'ordering': ['-booking_date', '-created_at'],
                'indexes': [
                    models.Index(fields=['booking_date'], name='desk_booking_date_idx'),
                    models.Index(fields=['email'], name='desk_booking_email_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('desk', 'booking_date'), name='desk_booking_unique_per_day'),
                ],
            },
        ),
    ]
