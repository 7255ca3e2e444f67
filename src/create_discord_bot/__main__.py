from .cli import app

app(prog_name="create-discord-bot")
