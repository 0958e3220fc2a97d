"""
Order statuses models - order states, order return states and their
per-language names.
"""
from django.db import models
from common.models import Language
from common.validators import hex_color_regex


class OrderState(models.Model):
    """
    Status an order goes through (awaiting payment, shipped, ...).
    The options tell the shop what happens when an order enters it.
    """
    color = models.CharField(
        max_length=7,
        validators=[hex_color_regex],
        help_text="Display color, e.g. #32CD32"
    )

    # Options triggered when an order enters this status
    logable = models.BooleanField(
        default=False,
        help_text="Consider the associated order as validated"
    )
    invoice = models.BooleanField(
        default=False,
        help_text="Allow a customer to download and view PDF versions of their invoices"
    )
    hidden = models.BooleanField(
        default=False,
        help_text="Hide this status in all customer orders"
    )
    send_email = models.BooleanField(
        default=False,
        help_text="Send an email to the customer when their order status has changed"
    )
    pdf_invoice = models.BooleanField(default=False, help_text="Attach invoice PDF to email")
    pdf_delivery = models.BooleanField(default=False, help_text="Attach delivery slip PDF to email")
    shipped = models.BooleanField(default=False, help_text="Set the order as shipped")
    paid = models.BooleanField(default=False, help_text="Set the order as paid")
    delivery = models.BooleanField(default=False, help_text="Show delivery PDF")

    # Bookkeeping
    unremovable = models.BooleanField(default=False)
    deleted = models.BooleanField(default=False, db_index=True)
    module_name = models.CharField(
        max_length=255,
        blank=True,
        help_text="Payment module owning this status (if any)"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['id']
        verbose_name = 'Order Status'
        verbose_name_plural = 'Order Statuses'

    def __str__(self):
        return self.get_name() or f"Order status #{self.pk}"

    def get_name(self, language=None):
        """Name in the given language, the default language otherwise."""
        language = language or Language.objects.default()
        translation = self.translations.filter(language=language).first()
        return translation.name if translation else ''


class OrderStateTranslation(models.Model):
    """Name and e-mail template of an order status for one language."""
    order_state = models.ForeignKey(
        OrderState,
        on_delete=models.CASCADE,
        related_name='translations'
    )
    language = models.ForeignKey(
        Language,
        on_delete=models.CASCADE,
        related_name='+'
    )
    name = models.CharField(max_length=64)
    template = models.CharField(
        max_length=64,
        blank=True,
        help_text="E-mail template sent when entering this status"
    )

    class Meta:
        verbose_name = 'Order Status Translation'
        verbose_name_plural = 'Order Status Translations'
        constraints = [
            models.UniqueConstraint(
                fields=['order_state', 'language'],
                name='unique_order_state_language'
            ),
        ]

    def __str__(self):
        return f"{self.language.iso_code}: {self.name}"


class OrderReturnState(models.Model):
    """
    Status of a merchandise return (waiting for package, return completed, ...).
    """
    color = models.CharField(
        max_length=7,
        validators=[hex_color_regex],
        help_text="Display color, e.g. #32CD32"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['id']
        verbose_name = 'Order Return Status'
        verbose_name_plural = 'Order Return Statuses'

    def __str__(self):
        return self.get_name() or f"Order return status #{self.pk}"

    def get_name(self, language=None):
        """Name in the given language, the default language otherwise."""
        language = language or Language.objects.default()
        translation = self.translations.filter(language=language).first()
        return translation.name if translation else ''


class OrderReturnStateTranslation(models.Model):
    """Name of an order return status for one language."""
    order_return_state = models.ForeignKey(
        OrderReturnState,
        on_delete=models.CASCADE,
        related_name='translations'
    )
    language = models.ForeignKey(
        Language,
        on_delete=models.CASCADE,
        related_name='+'
    )
    name = models.CharField(max_length=64)

    class Meta:
        verbose_name = 'Order Return Status Translation'
        verbose_name_plural = 'Order Return Status Translations'
        constraints = [
            models.UniqueConstraint(
                fields=['order_return_state', 'language'],
                name='unique_order_return_state_language'
            ),
        ]

    def __str__(self):
        return f"{self.language.iso_code}: {self.name}"
