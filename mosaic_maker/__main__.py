from mosaic_maker.cli import app

app(prog_name="mosaic-maker")
