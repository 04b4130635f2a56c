import click
from shop_admin.extensions import db
from shop_admin.exceptions import ValidationError
from shop_admin.seeds import seed_categories as load_category_tree
from shop_admin.services.auth_service import AuthService


def register_commands(app):
    """Attach maintenance commands to ``flask``"""

    @app.cli.command()
    def init_db():
        """Initialize database"""
        db.create_all()
        click.echo('Database initialized successfully!')

    @app.cli.command()
    def drop_db():
        """Drop all tables"""
        if click.confirm('Are you sure you want to drop all tables?'):
            db.drop_all()
            click.echo('Database dropped successfully!')
        else:
            click.echo('Operation cancelled')

    @app.cli.command()
    @click.option('--email', prompt='Admin email')
    @click.option('--username', prompt='Admin username')
    @click.option('--password', prompt='Admin password', hide_input=True)
    def create_admin(email, username, password):
        """Create admin user"""
        try:
            AuthService.create_admin(email=email, username=username, password=password)
        except ValidationError as e:
            raise click.ClickException(e.message)
        click.echo('Admin user created successfully!')

    @app.cli.command()
    def seed_categories():
        """Load the demo category tree"""
        created = load_category_tree()
        click.echo(f'Seeded {created} categories')
