from cardcatalog.main import run

run()
