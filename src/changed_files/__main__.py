from changed_files.cli.app import app

if __name__ == "__main__":
    app(prog_name="detect-changed-files")
