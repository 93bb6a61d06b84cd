from habitpulse.main import run

run()
