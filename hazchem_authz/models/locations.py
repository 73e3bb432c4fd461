"""Location hierarchy and the location-scoped site registers."""

from django.db import models

__all__ = ["Location", "SiteRegister"]

FULL_PATH_SEPARATOR = " > "


class Location(models.Model):
    """A node of the location hierarchy (region, district, school, detailed location).

    .. no_pii:
    """

    class LocationType(models.TextChoices):
        REGION = "Region"
        DISTRICT = "District"
        SCHOOL = "School"
        DETAILED_LOCATION = "Detailed Location"

    class Status(models.TextChoices):
        ACTIVE = "ACTIVE"
        INACTIVE = "INACTIVE"

    name = models.CharField(max_length=255)
    full_path = models.CharField(max_length=1024, blank=True, default="")
    parent = models.ForeignKey(
        "self",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="children",
    )
    location_type = models.CharField(max_length=32, choices=LocationType.choices, default=LocationType.REGION)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.ACTIVE)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["full_path", "id"]

    def build_full_path(self) -> str:
        """Join the names from the root of the hierarchy down to this location.

        Returns:
            str: The full path (e.g., 'North > District 4 > Hillside School').
        """
        names = [self.name]
        seen = {self.pk}
        parent = self.parent
        while parent is not None and parent.pk not in seen:
            names.append(parent.name)
            seen.add(parent.pk)
            parent = parent.parent
        return FULL_PATH_SEPARATOR.join(reversed(names))

    def update_descendant_paths(self) -> None:
        """Recompute the full path of every location below this one, level by level."""
        seen = {self.pk}
        parents = [self]
        while parents:
            parents_by_pk = {parent.pk: parent for parent in parents}
            children = list(Location.objects.filter(parent__in=parents).exclude(pk__in=seen))
            changed = []
            for child in children:
                seen.add(child.pk)
                full_path = f"{parents_by_pk[child.parent_id].full_path}{FULL_PATH_SEPARATOR}{child.name}"
                if child.full_path != full_path:
                    child.full_path = full_path
                    changed.append(child)
            Location.objects.bulk_update(changed, ["full_path"])
            parents = children

    def save(self, *args, **kwargs):
        self.full_path = self.build_full_path()
        super().save(*args, **kwargs)
        self.update_descendant_paths()

    def __str__(self):
        return self.full_path or self.name


class SiteRegister(models.Model):
    """A hazardous product held at a location.

    .. no_pii:
    """

    location = models.ForeignKey(Location, on_delete=models.PROTECT, related_name="site_registers")
    product_name = models.CharField(max_length=255)
    override_product_name = models.CharField(max_length=255, blank=True, default="")
    exact_location = models.CharField(max_length=255, blank=True, default="")
    storage_conditions = models.TextField(blank=True, default="")
    current_stock_level = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    max_stock_level = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    placarding_required = models.BooleanField(default=False)
    manifest_required = models.BooleanField(default=False)
    fire_protection_required = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["product_name", "id"]

    @property
    def display_name(self) -> str:
        return self.override_product_name or self.product_name

    def __str__(self):
        return f"{self.display_name} @ {self.location}"
