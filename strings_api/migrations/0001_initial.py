from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='StringRecord',
            fields=[
                ('id', models.CharField(max_length=64, primary_key=True, serialize=False)),
                ('value', models.TextField()),
                ('length', models.PositiveIntegerField()),
                ('is_palindrome', models.BooleanField()),
                ('unique_characters', models.PositiveIntegerField()),
                ('word_count', models.PositiveIntegerField()),
                ('sha256_hash', models.CharField(max_length=64, unique=True)),
                ('character_frequency_map', models.JSONField()),
                ('created_at', models.DateTimeField()),
            ],
            options={
                'verbose_name': 'String',
                'verbose_name_plural': 'Strings',
                'db_table': 'strings',
            },
        ),
    ]
