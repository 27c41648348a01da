import django.core.validators
import django.db.models.deletion
import uuid
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='FitnessClass',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('title', models.CharField(max_length=200)),
                ('date', models.DateField(help_text='Date of the (first) session')),
                ('class_type', models.CharField(max_length=50)),
                ('start_time', models.CharField(max_length=5, validators=[django.core.validators.RegexValidator(message='Time must be in 24-hour HH:MM format', regex='^([01]?\\d|2[0-3]):([0-5]\\d)$')])),
                ('end_time', models.CharField(max_length=5, validators=[django.core.validators.RegexValidator(message='Time must be in 24-hour HH:MM format', regex='^([01]?\\d|2[0-3]):([0-5]\\d)$')])),
                ('location', models.CharField(max_length=255)),
                ('max_capacity', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ('description', models.TextField()),
                ('requirements', models.TextField(blank=True, default='')),
                ('is_recurring_class', models.BooleanField(default=False)),
                ('frequency', models.CharField(blank=True, choices=[('Daily', 'Daily'), ('Weekly', 'Weekly'), ('Bi-weekly', 'Bi-weekly'), ('Monthly', 'Monthly')], max_length=20, null=True)),
                ('end_date', models.DateField(blank=True, help_text='Last day of the series (inclusive)', null=True)),
                ('attendees', models.ManyToManyField(blank=True, related_name='attended_classes', to=settings.AUTH_USER_MODEL)),
                ('trainer', models.ForeignKey(limit_choices_to={'role__in': ['trainer', 'admin']}, on_delete=django.db.models.deletion.CASCADE, related_name='classes_taught', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'classes_fitness_class',
                'ordering': ['date', 'start_time'],
                'indexes': [
                    models.Index(fields=['trainer', 'date'], name='classes_trainer_date_idx'),
                    models.Index(fields=['date'], name='classes_date_idx'),
                ],
            },
        ),
    ]
