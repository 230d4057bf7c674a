"""Category management commands."""

import click

from fintrack.cli.error_handling import exit_on_domain_error, handle_domain_error
from fintrack.cli.record_resolution import resolve_record_or_exit
from fintrack.domain.category import DEFAULT_COLOR, DEFAULT_ICON, CategoryService
from fintrack.domain.entities import TransactionType
from fintrack.domain.errors import DomainError

TYPE_CHOICES = [transaction_type.value for transaction_type in TransactionType]


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("add")
@click.argument("name", metavar="CATEGORY_NAME")
@click.option(
    "--type",
    "category_type",
    type=click.Choice(TYPE_CHOICES),
    default=TransactionType.EXPENSE.value,
    show_default=True,
    help="Whether the category is for income or expenses",
)
@click.option("--icon", default=DEFAULT_ICON, show_default=True, help="Display icon")
@click.option("--color", default=DEFAULT_COLOR, show_default=True, help="Display color")
@click.pass_context
@exit_on_domain_error
def add_category(ctx, name: str, category_type: str, icon: str, color: str):
    """Create a category.

    Examples:
        fintrack category add "Groceries"
        fintrack category add "Salary" --type income --icon "💼" --color "#10b981"
    """
    settings = ctx.obj["settings"]
    service = CategoryService(ctx.obj["store"], settings.owner_id)

    try:
        category_id = service.create_category(
            name=name, category_type=category_type, icon=icon, color=color
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created {category_type} category '{name.strip()}' (ID: {category_id})")


@category_group.command("list")
@click.option("--type", "category_type", type=click.Choice(TYPE_CHOICES), help="Only list one type")
@click.pass_context
@exit_on_domain_error
def list_categories(ctx, category_type: str | None):
    """List categories."""
    settings = ctx.obj["settings"]
    service = CategoryService(ctx.obj["store"], settings.owner_id)

    categories = service.list_categories(category_type)
    if not categories:
        click.echo("No categories found.")
        return

    click.echo("\nCategories:")
    click.echo("-" * 76)
    for cat in categories:
        click.echo(f"{cat.id:<34} {cat.icon} {cat.name:<24} {cat.type.value:<8} {cat.color}")


@category_group.command("edit")
@click.argument("category", metavar="CATEGORY")
@click.option("--name", help="New name")
@click.option("--icon", help="New display icon")
@click.option("--color", help="New display color")
@click.pass_context
@exit_on_domain_error
def edit_category(ctx, category: str, name: str | None, icon: str | None, color: str | None):
    """Change the name, icon or color of a category.

    CATEGORY can be a category name or ID.
    """
    settings = ctx.obj["settings"]
    service = CategoryService(ctx.obj["store"], settings.owner_id)
    category_id = resolve_record_or_exit(ctx, service.list_categories(), category, "category")

    try:
        service.update_category(category_id, name=name, icon=icon, color=color)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Updated category {category_id}")


@category_group.command("delete")
@click.argument("category", metavar="CATEGORY")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
@exit_on_domain_error
def delete_category(ctx, category: str, yes: bool):
    """Delete a category that no transaction or budget uses.

    CATEGORY can be a category name or ID.
    """
    settings = ctx.obj["settings"]
    service = CategoryService(ctx.obj["store"], settings.owner_id)
    category_id = resolve_record_or_exit(ctx, service.list_categories(), category, "category")
    category_obj = service.get_category(category_id)

    if not yes and not click.confirm(
        f'Are you sure you want to delete "{category_obj.name}"?'
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_category(category_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Deleted category '{category_obj.name}'")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
