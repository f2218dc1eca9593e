"""Services for git-workdir-keeper."""
