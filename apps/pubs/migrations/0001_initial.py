import uuid
from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Pub',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(db_index=True, max_length=200)),
                ('address', models.CharField(max_length=300)),
                ('latitude', models.FloatField(validators=[MinValueValidator(-90.0), MaxValueValidator(90.0)])),
                ('longitude', models.FloatField(validators=[MinValueValidator(-180.0), MaxValueValidator(180.0)])),
                ('phone_number', models.CharField(blank=True, max_length=50)),
                ('website', models.URLField(blank=True, max_length=500)),
                ('opening_hours', models.CharField(blank=True, max_length=500)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='created_pubs', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'pubs',
                'ordering': ['name'],
                'indexes': [
                    models.Index(fields=['latitude', 'longitude'], name='pubs_lat_lng_idx'),
                    models.Index(fields=['created_at'], name='pubs_created_idx'),
                ],
            },
        ),
    ]
