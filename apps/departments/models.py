"""Department directory models."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.db.models import Count, IntegerField, OuterRef, Subquery  # type: ignore
from django.db.models.functions import Coalesce  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class DepartmentQuerySet(models.QuerySet):
    def with_member_count(self) -> "DepartmentQuerySet":
        """Annotate ``member_count``: users whose ``department`` is the name."""
        from apps.users.models import CustomUser

        members = (
            CustomUser.objects.filter(department=OuterRef("name"), is_active=True)
            .order_by()
            .values("department")
            .annotate(total=Count("pk"))
            .values("total")
        )
        return self.annotate(
            member_count=Coalesce(Subquery(members, output_field=IntegerField()), 0),
        )


class Department(models.Model):
    """Organisational unit. Users reference it by ``name``."""

    name = models.CharField(_("Name"), max_length=100, unique=True)
    description = models.TextField(_("Description"), blank=True)
    head = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="headed_departments",
    )
    icon = models.CharField(_("Icon"), max_length=50)
    color = models.CharField(_("Color"), max_length=30)

    objects = DepartmentQuerySet.as_manager()

    class Meta:
        verbose_name = _("Department")
        verbose_name_plural = _("Departments")
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name
