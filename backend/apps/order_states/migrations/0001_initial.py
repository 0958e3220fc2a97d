import common.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('common', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='OrderReturnState',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('color', models.CharField(help_text='Display color, e.g. #32CD32', max_length=7, validators=[common.validators.hex_color_regex])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Order Return Status',
                'verbose_name_plural': 'Order Return Statuses',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='OrderState',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('color', models.CharField(help_text='Display color, e.g. #32CD32', max_length=7, validators=[common.validators.hex_color_regex])),
                ('logable', models.BooleanField(default=False, help_text='Consider the associated order as validated')),
                ('invoice', models.BooleanField(default=False, help_text='Allow a customer to download and view PDF versions of their invoices')),
                ('hidden', models.BooleanField(default=False, help_text='Hide this status in all customer orders')),
                ('send_email', models.BooleanField(default=False, help_text='Send an email to the customer when their order status has changed')),
                ('pdf_invoice', models.BooleanField(default=False, help_text='Attach invoice PDF to email')),
                ('pdf_delivery', models.BooleanField(default=False, help_text='Attach delivery slip PDF to email')),
                ('shipped', models.BooleanField(default=False, help_text='Set the order as shipped')),
                ('paid', models.BooleanField(default=False, help_text='Set the order as paid')),
                ('delivery', models.BooleanField(default=False, help_text='Show delivery PDF')),
                ('unremovable', models.BooleanField(default=False)),
                ('deleted', models.BooleanField(db_index=True, default=False)),
                ('module_name', models.CharField(blank=True, help_text='Payment module owning this status (if any)', max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Order Status',
                'verbose_name_plural': 'Order Statuses',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='OrderReturnStateTranslation',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=64)),
                ('language', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='+', to='common.language')),
                ('order_return_state', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='translations', to='order_states.orderreturnstate')),
            ],
            options={
                'verbose_name': 'Order Return Status Translation',
                'verbose_name_plural': 'Order Return Status Translations',
                'constraints': [models.UniqueConstraint(fields=('order_return_state', 'language'), name='unique_order_return_state_language')],
            },
        ),
        migrations.CreateModel(
            name='OrderStateTranslation',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=64)),
                ('template', models.CharField(blank=True, help_text='E-mail template sent when entering this status', max_length=64)),
                ('language', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='+', to='common.language')),
                ('order_state', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='translations', to='order_states.orderstate')),
            ],
            options={
                'verbose_name': 'Order Status Translation',
                'verbose_name_plural': 'Order Status Translations',
                'constraints': [models.UniqueConstraint(fields=('order_state', 'language'), name='unique_order_state_language')],
            },
        ),
    ]
