"""GraphQL documents for the GitHub provider."""

SEARCH_MERGED_PULL_REQUESTS = """
query($searchQuery: String!, $first: Int!) {
  search(query: $searchQuery, type: ISSUE, first: $first) {
    issueCount
    nodes {
      ... on PullRequest {
        title
        url
        mergedAt
        repository { name }
      }
    }
  }
}
"""
