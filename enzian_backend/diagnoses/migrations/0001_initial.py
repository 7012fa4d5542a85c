import django.db.models.deletion
from django.db import migrations, models


SIZE_CHOICES = [('<3cm', 'Menor que 3 cm'), ('3-7cm', 'Entre 3 e 7 cm'), ('>7cm', 'Maior que 7 cm')]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('doctors', '0001_initial'),
        ('patients', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Diagnosis',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('peritoneum', models.CharField(choices=[('P1', 'Lesões superficiais isoladas'), ('P2', 'Lesões múltiplas superficiais'), ('P3', 'Lesões profundas ou aderências')], max_length=2)),
                ('peritoneum_size', models.CharField(blank=True, choices=SIZE_CHOICES, max_length=8, null=True)),
                ('ovary', models.CharField(choices=[('O1', 'Endometrioma superficial'), ('O2', 'Endometrioma profundo'), ('O3', 'Endometrioma bilateral')], max_length=2)),
                ('ovary_size', models.CharField(blank=True, choices=SIZE_CHOICES, max_length=8, null=True)),
                ('tube', models.CharField(choices=[('T1', 'Lesão tubária unilateral'), ('T2', 'Lesão tubária bilateral'), ('T3', 'Obstrução tubária completa')], max_length=2)),
                ('tube_size', models.CharField(blank=True, choices=SIZE_CHOICES, max_length=8, null=True)),
                ('deep_endometriosis', models.CharField(choices=[('A', 'Infiltração superficial'), ('B', 'Infiltração profunda'), ('C', 'Infiltração de órgãos adjacentes')], max_length=1)),
                ('deep_endometriosis_size', models.CharField(blank=True, choices=SIZE_CHOICES, max_length=8, null=True)),
                ('observations', models.TextField(blank=True, null=True)),
                ('final_classification', models.CharField(db_index=True, max_length=7)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('doctor', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='diagnoses', to='doctors.doctor')),
                ('patient', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='diagnoses', to='patients.patient')),
            ],
            options={
                'verbose_name': 'Diagnosis',
                'verbose_name_plural': 'Diagnoses',
                'db_table': 'diagnoses',
                'ordering': ['-created_at', '-id'],
                'indexes': [models.Index(fields=['patient', 'created_at'], name='diagnoses_patient_created_idx')],
            },
        ),
    ]
