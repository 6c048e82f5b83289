"""Example usage of the pull requests client."""

from pathlib import Path

from github_pulls import GitHub, MergeStatus


# Example 1: List open pull requests
def example_list() -> None:
    """Print every open pull request of a repository."""
    github = GitHub(user="octocat", repo="hello-world")

    github.pull_requests.list(
        params={"state": "open"},
        callback=lambda pull: print(f"#{pull['number']} {pull['title']}"),
    )


# Example 2: Open a pull request from an existing issue
def example_create_from_issue() -> None:
    """Turn issue #5 into a pull request."""
    github = GitHub.from_config_file(Path("github-pulls.yaml"))

    pull = github.pull_requests.create(
        "octocat",
        "hello-world",
        {"issue": 5, "head": "octocat:new-feature", "base": "main"},
    )
    print(f"Opened {pull['html_url']}")


# Example 3: Merge if not merged yet
def example_merge() -> None:
    """Merge pull request #42 unless it is already merged."""
    pulls = GitHub().pull_requests

    check = pulls.merge_status("octocat", "hello-world", 42)
    if check.status is MergeStatus.MERGED:
        print("Already merged")
    elif check.status is MergeStatus.NOT_MERGED:
        result = pulls.merge("octocat", "hello-world", 42, {"commit_message": "Ship it"})
        print(result["message"])
    else:
        print(f"Could not check merge status: {check.error}")


# Example 4: Review comments
def example_comments() -> None:
    """Reply to the first review comment of pull request #42."""
    comments = GitHub(user="octocat", repo="hello-world").pull_requests.comments

    first = comments.list(number=42)[0]
    comments.create(None, None, 42, {"body": "Done", "in_reply_to": first["id"]})


if __name__ == "__main__":
    example_list()
