"""
Management command to install the standard order statuses.
Statuses whose default-language name already exists are skipped, so the
command can be run again safely.

Usage:
    python manage.py seed_order_states --dry-run  # Preview
    python manage.py seed_order_states            # Execute
"""
from django.core.management.base import BaseCommand
from django.db import transaction
from common.models import Language
from apps.order_states.commands import AddOrderReturnStateCommand, AddOrderStateCommand
from apps.order_states.exceptions import DuplicateOrderReturnStateNameException, DuplicateOrderStateNameException
from apps.order_states.models import OrderReturnStateTranslation, OrderStateTranslation
from apps.order_states.wiring import build_command_bus

# (name, color, template, flags)
DEFAULT_ORDER_STATES = [
    ('Awaiting check payment', '#4169E1', 'cheque', {'send_email': True}),
    ('Payment accepted', '#32CD32', 'payment',
     {'logable': True, 'invoice': True, 'send_email': True, 'pdf_invoice': True, 'paid': True}),
    ('Processing in progress', '#FF8C00', 'preparation',
     {'logable': True, 'invoice': True, 'send_email': True, 'paid': True, 'delivery': True}),
    ('Shipped', '#8A2BE2', 'shipped',
     {'logable': True, 'invoice': True, 'send_email': True, 'shipped': True, 'paid': True,
      'delivery': True}),
    ('Delivered', '#108510', '',
     {'logable': True, 'invoice': True, 'shipped': True, 'paid': True, 'delivery': True}),
    ('Canceled', '#DC143C', 'order_canceled', {'send_email': True}),
    ('Refunded', '#EC2E15', 'refund', {'invoice': True, 'send_email': True, 'paid': True}),
    ('Payment error', '#8F0621', 'payment_error', {'send_email': True}),
    ('Awaiting bank wire payment', '#4169E1', 'bankwire', {'send_email': True}),
    ('Remote payment accepted', '#32CD32', 'payment', {'logable': True, 'invoice': True, 'paid': True}),
    ('On backorder (paid)', '#FF69B4', 'outofstock',
     {'logable': True, 'invoice': True, 'send_email': True, 'paid': True}),
    ('On backorder (not paid)', '#FF69B4', 'outofstock', {'send_email': True}),
    ('Awaiting Cash On Delivery validation', '#4169E1', 'cashondelivery', {'send_email': True}),
]

DEFAULT_ORDER_RETURN_STATES = [
    ('Waiting for confirmation', '#4169E1'),
    ('Waiting for package', '#8A2BE2'),
    ('Package received', '#32CD32'),
    ('Return denied', '#DC143C'),
    ('Return completed', '#108510'),
]


class Command(BaseCommand):
    help = 'Install the standard order statuses and order return statuses'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Preview the statuses that would be created',
        )

    def handle(self, *args, **options):
        dry_run = options['dry_run']

        language = Language.objects.default()
        if language is None:
            if dry_run:
                self.stdout.write(self.style.WARNING('DRY RUN: Would create default language "en"'))
                language = Language(iso_code='en', name='English', is_active=True, is_default=True)
            else:
                language = Language.objects.create(
                    iso_code='en', name='English', is_active=True, is_default=True
                )
                self.stdout.write(f'Created default language "{language.iso_code}"')

        existing_states = set()
        existing_return_states = set()
        if language.pk:
            existing_states = {
                name.lower() for name in OrderStateTranslation.objects.filter(
                    language=language, order_state__deleted=False
                ).values_list('name', flat=True)
            }
            existing_return_states = {
                name.lower() for name in OrderReturnStateTranslation.objects.filter(
                    language=language
                ).values_list('name', flat=True)
            }

        pending_states = [s for s in DEFAULT_ORDER_STATES if s[0].lower() not in existing_states]
        pending_return_states = [
            s for s in DEFAULT_ORDER_RETURN_STATES if s[0].lower() not in existing_return_states
        ]

        if dry_run:
            self.stdout.write(
                self.style.WARNING(
                    f'DRY RUN: Would create {len(pending_states)} order statuses '
                    f'and {len(pending_return_states)} order return statuses'
                )
            )
            for name, *_ in pending_states + pending_return_states:
                self.stdout.write(f'  - {name}')
            return

        command_bus = build_command_bus()
        created = 0

        with transaction.atomic():
            for name, color, template, flags in pending_states:
                try:
                    command_bus.handle(AddOrderStateCommand(
                        names={language.iso_code: name},
                        color=color,
                        templates={language.iso_code: template},
                        **flags,
                    ))
                    created += 1
                except DuplicateOrderStateNameException:
                    self.stdout.write(self.style.WARNING(f'Skipped existing order status "{name}"'))

            for name, color in pending_return_states:
                try:
                    command_bus.handle(AddOrderReturnStateCommand(
                        names={language.iso_code: name},
                        color=color,
                    ))
                    created += 1
                except DuplicateOrderReturnStateNameException:
                    self.stdout.write(self.style.WARNING(f'Skipped existing order return status "{name}"'))

        self.stdout.write(self.style.SUCCESS(f'Successfully created {created} statuses'))
