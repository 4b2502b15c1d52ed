from aur_repo_builder.main import run

run()
