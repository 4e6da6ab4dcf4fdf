from unittest.mock import MagicMock

from django.contrib.auth.models import Group
from django.db import models
from django.test import SimpleTestCase

from media_youtube.forms import YouTubeSettingsForm, get_source_field_options


def make_field(name, field_class, **kwargs):
    field = field_class(**kwargs)
    field.set_attributes_from_name(name)
    return field


def make_model(*fields):
    model = MagicMock()
    model._meta.get_fields.return_value = list(fields)
    return model


class TestSourceFieldOptions(SimpleTestCase):
    def setUp(self):
        self.model = make_model(
            make_field("id", models.BigAutoField, primary_key=True),
            make_field("name", models.CharField, max_length=255),
            make_field("embed_code", models.TextField),
            make_field("field_url", models.URLField, verbose_name="video URL"),
            make_field("views", models.IntegerField),
            make_field("published", models.DateTimeField),
        )

    def test_only_text_and_link_fields(self):
        options = get_source_field_options(self.model)

        self.assertEqual(
            options,
            [("name", "Name"), ("embed_code", "Embed code"), ("field_url", "Video URL")],
        )

    def test_no_model(self):
        self.assertEqual(get_source_field_options(None), [])

    def test_real_model_skips_relations(self):
        self.assertEqual(get_source_field_options(Group), [("name", "Name")])


class TestYouTubeSettingsForm(SimpleTestCase):
    def setUp(self):
        self.model = make_model(
            make_field("field_url", models.URLField),
            make_field("views", models.IntegerField),
        )

    def test_labels(self):
        form = YouTubeSettingsForm(model=self.model)
        field = form.fields["source_field"]

        self.assertEqual(field.label, "Field with source information")
        self.assertEqual(
            field.help_text, "Field on media entity that stores YouTube embed code or URL."
        )
        self.assertEqual(list(field.choices), [("field_url", "Field url")])

    def test_valid_selection(self):
        form = YouTubeSettingsForm(data={"source_field": "field_url"}, model=self.model)

        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.cleaned_data, {"source_field": "field_url"})

    def test_rejects_field_of_wrong_type(self):
        form = YouTubeSettingsForm(data={"source_field": "views"}, model=self.model)

        self.assertFalse(form.is_valid())
        self.assertIn("source_field", form.errors)

    def test_initial_from_configuration(self):
        form = YouTubeSettingsForm(model=self.model, initial={"source_field": "field_url"})

        self.assertEqual(form["source_field"].value(), "field_url")
