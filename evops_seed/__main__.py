from .seed import run

run()
