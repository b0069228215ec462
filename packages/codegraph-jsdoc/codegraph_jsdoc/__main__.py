from codegraph_jsdoc.cli import app

app()
