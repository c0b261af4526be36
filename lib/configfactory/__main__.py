from configfactory.cli import app

app(prog_name="configfactory")
