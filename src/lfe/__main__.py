from lfe.cli.app import app

app(prog_name="lfe")
