from pastebininit.main import run

run()
