"""
Shared models: shop languages and the admin action audit trail.
"""
from django.db import models
from django.conf import settings


class LanguageQuerySet(models.QuerySet):

    def active(self):
        return self.filter(is_active=True)

    def default(self):
        """
        Return the default language.

        Falls back to the first active language when none is flagged as
        default, and to None when the shop has no active language at all.
        """
        active = self.active()
        return active.filter(is_default=True).first() or active.order_by('id').first()


class Language(models.Model):
    """A language the shop content is translated into"""

    iso_code = models.CharField(
        max_length=5,
        unique=True,
        help_text="ISO 639-1 code, e.g. 'en'"
    )
    name = models.CharField(max_length=64)
    is_active = models.BooleanField(default=True, db_index=True)
    is_default = models.BooleanField(
        default=False,
        help_text="Language used for listings and required fields"
    )

    objects = LanguageQuerySet.as_manager()

    class Meta:
        db_table = 'language'
        verbose_name = 'Language'
        verbose_name_plural = 'Languages'
        ordering = ['id']

    def __str__(self):
        return f"{self.iso_code} - {self.name}"


class AdminActionLog(models.Model):
    """Log all back office actions"""

    class Action(models.TextChoices):
        CREATE_ORDER_STATE = 'CREATE_ORDER_STATE', 'Create Order Status'
        UPDATE_ORDER_STATE = 'UPDATE_ORDER_STATE', 'Update Order Status'
        TOGGLE_ORDER_STATE = 'TOGGLE_ORDER_STATE', 'Toggle Order Status Option'
        CREATE_ORDER_RETURN_STATE = 'CREATE_ORDER_RETURN_STATE', 'Create Order Return Status'
        UPDATE_ORDER_RETURN_STATE = 'UPDATE_ORDER_RETURN_STATE', 'Update Order Return Status'

    admin_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='admin_actions_performed',
        help_text="Employee who performed the action"
    )
    action = models.CharField(
        max_length=30,
        choices=Action.choices,
        db_index=True
    )
    target_model = models.CharField(max_length=50, blank=True)
    target_id = models.CharField(max_length=100, blank=True)
    details = models.JSONField(
        default=dict,
        blank=True,
        help_text="Additional details about the action"
    )
    ip_address = models.GenericIPAddressField(
        null=True,
        blank=True
    )
    user_agent = models.TextField(blank=True)
    timestamp = models.DateTimeField(
        auto_now_add=True,
        db_index=True
    )

    class Meta:
        db_table = 'admin_action_log'
        verbose_name = 'Admin Action Log'
        verbose_name_plural = 'Admin Action Logs'
        indexes = [
            models.Index(fields=['admin_user', 'timestamp'], name='admin_actio_admin_u_5b1f0e_idx'),
            models.Index(fields=['target_model', 'target_id'], name='admin_actio_target__9c2d4a_idx'),
        ]
        ordering = ['-timestamp']

    def __str__(self):
        target = f"→ {self.target_model} #{self.target_id}" if self.target_id else ""
        return f"{self.admin_user} {self.get_action_display()} {target} @ {self.timestamp}"
