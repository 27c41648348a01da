import django.core.validators
import django.db.models.deletion
import uuid
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('booking', '0001_initial'),
        ('payment', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='MinuteTransaction',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('reference', models.CharField(max_length=100, unique=True)),
                ('transaction_type', models.CharField(choices=[('credit', 'Credit'), ('debit', 'Debit')], max_length=10)),
                ('category', models.CharField(choices=[('booking', 'Class Booking'), ('package_purchase', 'Package Purchase')], max_length=30)),
                ('minutes', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ('balance_before', models.IntegerField()),
                ('balance_after', models.IntegerField()),
                ('description', models.TextField(blank=True, default='')),
                ('booking', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='minute_transactions', to='booking.booking')),
                ('package', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='minute_transactions', to='payment.package')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='minute_transactions', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'ledger_minute_transaction',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['user', '-created_at'], name='ledger_user_created_idx'),
                    models.Index(fields=['reference'], name='ledger_reference_idx'),
                ],
            },
        ),
    ]
