import os

import click

@click.command()
@click.option('--host', default=lambda: os.getenv('HOST', '127.0.0.1'), help='Interface to bind')
@click.option('--port', default=lambda: int(os.getenv('PORT', '8000')), type=int, help='Port to listen on')
@click.option('--reload', is_flag=True, help='Restart the server when code changes')
def serve(host: str, port: int, reload: bool):
    """Run the catalog REST API"""
    import uvicorn
    click.echo(click.style("Serving on ", fg='blue') + click.style(f"http://{host}:{port}/api", fg='cyan'))
    uvicorn.run("api.main:app", host=host, port=port, reload=reload)
