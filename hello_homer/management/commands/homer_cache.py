"""
Management command for quote cache operations.
"""
import logging

from django.core.management.base import BaseCommand, CommandError

from hello_homer.cache_utils import clear_cached_quote, get_cached_quote, warm_quote_cache

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Utility command for Hello Homer quote cache operations'

    def add_arguments(self, parser):
        parser.add_argument(
            '--action',
            choices=['show', 'clear', 'warm'],
            required=True,
            help='The cache operation to perform'
        )
        parser.add_argument(
            '--force',
            action='store_true',
            help='With --action warm, replace a cached quote instead of keeping it'
        )

    def handle(self, *args, **options):
        action = options['action']

        try:
            if action == 'show':
                quote = get_cached_quote()
                if quote is None:
                    self.stdout.write('No quote cached')
                else:
                    self.stdout.write(f'{quote.text} (Season {quote.season} - {quote.episode_title})')
                    self.stdout.write(quote.image_url)

            elif action == 'clear':
                clear_cached_quote()
                self.stdout.write(self.style.SUCCESS('Successfully cleared the cached quote'))

            elif action == 'warm':
                result = warm_quote_cache(force=options['force'])
                if result.is_fallback:
                    raise CommandError(f'Could not fetch a quote: {result.reason}')
                self.stdout.write(self.style.SUCCESS(f'Quote cache warm (source: {result.source})'))

        except CommandError:
            raise
        except Exception as e:
            logger.exception(f"Error in homer_cache command: {str(e)}")
            raise CommandError(f'An error occurred: {str(e)}')
