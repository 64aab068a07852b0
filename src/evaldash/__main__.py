from evaldash.cli import run

run()
