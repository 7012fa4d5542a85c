from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='AuditLog',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('action', models.CharField(db_index=True, max_length=50)),
                ('patient_id', models.IntegerField(blank=True, db_index=True, null=True)),
                ('doctor_id', models.IntegerField(blank=True, db_index=True, null=True)),
                ('timestamp', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('meta', models.JSONField(blank=True, null=True)),
            ],
            options={
                'verbose_name': 'Audit Log',
                'verbose_name_plural': 'Audit Logs',
                'db_table': 'core_auditlog',
                'ordering': ['-timestamp', '-id'],
                'indexes': [
                    models.Index(fields=['action', 'timestamp'], name='core_auditl_action_5b1f0e_idx'),
                    models.Index(fields=['patient_id', 'timestamp'], name='core_auditl_patient_9c2d41_idx'),
                ],
            },
        ),
    ]
