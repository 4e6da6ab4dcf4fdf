"""Management command to inspect how a YouTube URL or embed code is resolved."""

import logging

from django.core.management.base import BaseCommand, CommandError

from media_youtube.choices import FETCHING_FIELDS, MediaField
from media_youtube.exceptions import MediaValidationError, UnsupportedFieldError
from media_youtube.media_types import get_media_type


class Command(BaseCommand):
    help = "Validate a YouTube URL/embed code and print the fields resolved for it"

    def add_arguments(self, parser):
        parser.add_argument(
            "reference",
            type=str,
            help="YouTube URL or embed code",
        )
        parser.add_argument(
            "--field",
            action="append",
            dest="fields",
            help="Field to resolve (repeatable, default: all fields that don't download)",
        )
        parser.add_argument(
            "--fetch",
            action="store_true",
            help="Also copy the thumbnail to the local store",
        )
        parser.add_argument(
            "--source-field",
            type=str,
            default="source",
            help="Name reported in validation errors (default: source)",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug logs",
        )

    def handle(self, *args, **options):
        reference = options["reference"]
        source_field = options.get("source_field") or "source"
        requested = options.get("fields")
        fetch = options.get("fetch", False)

        if options.get("verbose"):
            logging.getLogger("media_youtube").setLevel(logging.DEBUG)

        media_type = get_media_type("youtube", {"source_field": source_field})
        media = {source_field: reference}

        try:
            media_type.validate(media)
        except MediaValidationError as e:
            raise CommandError(str(e)) from e

        if requested:
            fields = requested
        else:
            fields = [field.value for field in MediaField if field not in FETCHING_FIELDS]
            if fetch:
                fields.append(MediaField.LOCAL_THUMBNAIL.value)

        self.stdout.write(self.style.SUCCESS(f"Valid YouTube reference ({media_type.label})"))
        for name in fields:
            try:
                value = media_type.resolver.resolve_field(reference, name)
            except UnsupportedFieldError as e:
                raise CommandError(str(e)) from e
            self._print_field(name, value)

    def _print_field(self, name, value):
        if value is None:
            value = "(not available)"
        self.stdout.write(f"  {name:<18} {value}")
