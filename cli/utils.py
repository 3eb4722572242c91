import click
from typing import Any, Callable, Dict, List, Mapping, Optional

class ProgressTracker:
    """Tracks rows processed by an import and the rows that failed"""
    
    def __init__(self, verbose: bool = False):
        self.processed = 0
        self.failed: List[Dict[str, str]] = []
        self.verbose = verbose
        
    def add_failed(self, row: Mapping[str, Any], reason: str):
        """Record a row that could not be imported"""
        self.failed.append({
            'name': row.get('name') or '',
            'author': f"{row.get('firstName') or ''} {row.get('lastName') or ''}".strip(),
            'reason': reason,
        })
    
    def increment_processed(self):
        """Increment the processed counter"""
        self.processed += 1
    
    def print_results(self, counters: Mapping[str, int]):
        """Print the import counters followed by any failed rows"""
        click.echo("\n" + click.style("Results:", fg='blue'))
        click.echo(click.style("Processed: ", fg='blue') + 
                  click.style(str(self.processed), fg='cyan') + 
                  click.style(" rows", fg='blue'))
        for counter, value in counters.items():
            if counter == 'countRows':
                continue
            label = counter[len('count'):]
            click.echo(click.style(f"{label}: ", fg='blue') + 
                      click.style(str(value), fg='green' if value else 'cyan') + 
                      click.style(" created", fg='blue'))
        
        if self.failed and self.verbose:
            click.echo("\n" + click.style("Failed rows:", fg='red'))
            for failure in self.failed:
                click.echo("\n" + click.style(f"Name: {failure['name']}", fg='red'))
                click.echo(click.style(f"Author: {failure['author']}", fg='red'))
                click.echo(click.style(f"Reason: {failure['reason']}", fg='red'))
        elif self.failed:
            click.echo(click.style(f"\nFailed {len(self.failed)} rows. ", fg='red') + 
                      click.style("Use --verbose to see details.", fg='blue'))

def create_progress_bar(items: List[Any], verbose: bool = False, 
                       label: str = 'Processing', 
                       item_name_func: Optional[Callable[[Any], str]] = None) -> click.progressbar:
    """Create a standardized progress bar for long running commands"""
    return click.progressbar(
        items,
        label=click.style(label, fg='blue'),
        item_show_func=lambda x: click.style(item_name_func(x), fg='cyan') if x and verbose and item_name_func else None,
        show_eta=True,
        show_percent=True,
        width=50
    )
