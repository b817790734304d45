from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='QRCode',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('shop', models.CharField(db_index=True, max_length=255, verbose_name='Shop')),
                ('title', models.CharField(max_length=255, verbose_name='Title')),
                ('destination', models.CharField(choices=[('product', 'Product page'), ('cart', 'Checkout with product in cart')], default='product', max_length=20, verbose_name='Destination')),
                ('product_id', models.CharField(max_length=255, verbose_name='Product ID')),
                ('product_variant_id', models.CharField(blank=True, max_length=255, verbose_name='Product variant ID')),
                ('product_handle', models.CharField(blank=True, max_length=255, verbose_name='Product handle')),
                ('scans', models.PositiveIntegerField(default=0, verbose_name='Scans')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created')),
            ],
            options={
                'verbose_name': 'QR code',
                'verbose_name_plural': 'QR codes',
                'ordering': ['-id'],
            },
        ),
    ]
