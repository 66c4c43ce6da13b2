"""CLI (typer + rich): comandos, componentes visuales y logging."""
