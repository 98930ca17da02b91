"""
Django management command for previewing image URL rewriting.

Shows the delivery URL for an image URL under the current configuration and,
when dimensions are given, the width/height/srcset decision for CDN
parameters. Nothing is fetched or stored.
"""

import json
from dataclasses import replace

from django.core.management.base import BaseCommand, CommandError

from imagecdn.service.config import load_config
from imagecdn.service.query import append_query, merge_query, serialize_query
from imagecdn.service.responsive import compute_responsive_attributes
from imagecdn.service.sizes import resolve_size, split_size_query
from imagecdn.service.transform import transform_image_url


class Command(BaseCommand):
    help = 'Preview CDN URL rewriting and responsive attributes for an image URL'

    def add_arguments(self, parser):
        parser.add_argument('url', type=str, help='Original image URL')
        parser.add_argument(
            '--size',
            type=str,
            default='full',
            help="Size specifier, e.g. 'large:full?w=300' (default: full)",
        )
        parser.add_argument(
            '--query',
            action='append',
            default=[],
            metavar='KEY=VALUE',
            help='CDN parameter, may be repeated (overrides parameters in --size)',
        )
        parser.add_argument('--width', type=int, default=0, help='Intrinsic image width')
        parser.add_argument('--height', type=int, default=0, help='Intrinsic image height')
        parser.add_argument('--host', type=str, help='CDN host (overrides settings for this run)')
        parser.add_argument('--verbose', action='store_true', help='Enable verbose output')
        parser.add_argument('--json', action='store_true', help='Output result as JSON')

    def handle(self, *args, **options):
        url = options['url']
        verbose = options['verbose']
        output_json = options['json']

        config = load_config()
        if options['host']:
            config = replace(config, cdn_host=options['host'])

        def log(message):
            if verbose and not output_json:
                self.stdout.write(message)

        explicit = {}
        for pair in options['query']:
            key, sep, value = pair.partition('=')
            if not sep or not key:
                raise CommandError(f'Invalid --query value {pair!r}, expected KEY=VALUE')
            explicit[key] = value

        log(f'CDN host: {config.cdn_host or "(none)"}')
        log(f'Asset origin: {config.origin_url or "(none)"}')
        log(f'WebP: {config.webp}, replace extension: {config.ext_replace}')

        size_name, embedded_query = split_size_query(resolve_size(options['size'], config=config))
        log(f'Resolved size: {size_name}')

        delivery_url = transform_image_url(url, config=config)
        params = {}
        if config.has_cdn and (explicit or embedded_query):
            params = merge_query(embedded_query, explicit)
            delivery_url = append_query(delivery_url, serialize_query(params))

        result = {
            'url': url,
            'delivery_url': delivery_url,
            'size': size_name,
            'query': params,
        }

        if options['width'] and options['height']:
            computed = compute_responsive_attributes(options['width'], options['height'], params)
            result.update(
                {
                    'width': computed.width,
                    'height': computed.height,
                    'srcset': computed.allow_srcset,
                    'crop': computed.is_crop,
                }
            )
        elif options['width'] or options['height']:
            raise CommandError('--width and --height must be given together')

        if output_json:
            self.stdout.write(json.dumps(result, indent=2))
            return

        self.stdout.write(self.style.SUCCESS(delivery_url))
        if 'width' in result:
            self.stdout.write(f'Dimensions: {result["width"]}x{result["height"]}')
            self.stdout.write(f'Srcset: {"yes" if result["srcset"] else "no"}')
            if result['crop']:
                self.stdout.write('Crop: yes')
