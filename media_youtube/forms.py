from typing import Any, List, Tuple

from django import forms

from .choices import SOURCE_FIELD_TYPES


def get_source_field_options(model: Any) -> List[Tuple[str, str]]:
    """
    List the fields of a host model that can hold a YouTube URL or embed code.

    Args:
        model: Django model class (or None)

    Returns:
        (field name, label) tuples for string, long text and link fields
    """
    if model is None:
        return []

    options = []
    for field in model._meta.get_fields():
        # Skip reverse relations and other non-column fields
        if not getattr(field, "concrete", False):
            continue
        if field.get_internal_type() in SOURCE_FIELD_TYPES:
            label = str(getattr(field, "verbose_name", "") or field.name)
            options.append((field.name, label[:1].upper() + label[1:]))
    return options


class YouTubeSettingsForm(forms.Form):
    """Settings form for the YouTube media type."""

    source_field = forms.ChoiceField(
        label="Field with source information",
        help_text="Field on media entity that stores YouTube embed code or URL.",
        choices=[],
    )

    def __init__(self, *args, **kwargs):
        # The host passes its media model so we can offer its fields
        self.model = kwargs.pop("model", None)
        super().__init__(*args, **kwargs)
        self.fields["source_field"].choices = get_source_field_options(self.model)
