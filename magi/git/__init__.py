"""Reading and changing a Git repository by way of the git program."""