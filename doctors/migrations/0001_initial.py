from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Doctor',
            fields=[
                ('id', models.CharField(max_length=64, primary_key=True, serialize=False)),
                ('category', models.CharField(db_index=True, default='MEDICO', max_length=40)),
                ('executive', models.CharField(blank=True, db_index=True, max_length=120)),
                ('name', models.CharField(blank=True, db_index=True, max_length=255)),
                ('specialty', models.CharField(blank=True, max_length=120)),
                ('sub_specialty', models.CharField(blank=True, max_length=120)),
                ('address', models.CharField(blank=True, max_length=255)),
                ('hospital', models.CharField(blank=True, max_length=255)),
                ('area', models.CharField(blank=True, max_length=120)),
                ('phone', models.CharField(blank=True, max_length=40)),
                ('email', models.CharField(blank=True, max_length=255)),
                ('floor', models.CharField(blank=True, max_length=40)),
                ('office_number', models.CharField(blank=True, max_length=40)),
                ('birth_date', models.CharField(blank=True, max_length=10)),
                ('cedula', models.CharField(blank=True, max_length=40)),
                ('profile', models.TextField(blank=True)),
                ('classification', models.CharField(blank=True, choices=[('A', 'A'), ('B', 'B'), ('C', 'C')], max_length=1)),
                ('social_style', models.CharField(blank=True, max_length=80)),
                ('attitudinal_segment', models.CharField(blank=True, max_length=80)),
                ('important_notes', models.TextField(blank=True)),
                ('is_insurance_doctor', models.BooleanField(default=False)),
                ('visits', models.JSONField(blank=True, default=list)),
                ('schedule', models.JSONField(blank=True, default=list)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'ordering': ['-updated_at', 'id'],
                'indexes': [models.Index(fields=['executive', 'classification'], name='doctor_exec_class_idx')],
            },
        ),
    ]
