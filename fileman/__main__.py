from fileman.cli import cli

cli(prog_name="fileman")
