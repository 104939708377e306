from gstester.cli import app

app(prog_name="gstester")
