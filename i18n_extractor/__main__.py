from i18n_extractor.cli import app

app(prog_name="haml-i18n-extractor")
