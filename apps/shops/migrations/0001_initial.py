from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Shop',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('domain', models.CharField(help_text='Shop domain, e.g. example.myshopify.com', max_length=255, unique=True, verbose_name='Domain')),
                ('access_token', models.CharField(max_length=255, verbose_name='Admin API access token')),
                ('scope', models.CharField(blank=True, max_length=500, verbose_name='Granted scopes')),
                ('is_active', models.BooleanField(default=True, verbose_name='Active')),
                ('installed_at', models.DateTimeField(auto_now_add=True, verbose_name='Installed')),
            ],
            options={
                'verbose_name': 'Shop',
                'verbose_name_plural': 'Shops',
                'ordering': ['domain'],
            },
        ),
    ]
