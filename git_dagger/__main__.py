from git_dagger.cli import run

run()
