import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Procedure',
            fields=[
                ('id', models.CharField(max_length=64, primary_key=True, serialize=False)),
                ('date', models.CharField(blank=True, db_index=True, max_length=10)),
                ('time', models.CharField(blank=True, max_length=5)),
                ('hospital', models.CharField(blank=True, max_length=255)),
                ('doctor_id', models.CharField(blank=True, db_index=True, max_length=64)),
                ('doctor_name', models.CharField(blank=True, max_length=255)),
                ('procedure_type', models.CharField(blank=True, max_length=120)),
                ('payment_type', models.CharField(blank=True, max_length=60)),
                ('cost', models.FloatField(default=0, validators=[django.core.validators.MinValueValidator(0)])),
                ('commission', models.FloatField(default=0, validators=[django.core.validators.MinValueValidator(0)])),
                ('technician', models.CharField(blank=True, max_length=120)),
                ('notes', models.TextField(blank=True)),
                ('status', models.CharField(choices=[('scheduled', 'Scheduled'), ('performed', 'Performed')], db_index=True, default='scheduled', max_length=10)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'ordering': ['-date', 'id'],
            },
        ),
    ]
