from gcd_app.main import run

run()
