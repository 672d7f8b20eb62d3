"""GraphQL documents sent to the upstream `/graphql` endpoint.

Two shapes:
- `USER_SUMMARY_QUERY`: narrow, one per search candidate.
- `USER_PROFILE_QUERY`: wide, for a direct lookup of a known username.
"""

from __future__ import annotations

USER_SUMMARY_QUERY = """
query userPublicProfile($username: String!) {
  matchedUser(username: $username) {
    username
    profile {
      ranking
      userAvatar
      realName
      reputation
    }
  }
}
"""

USER_PROFILE_QUERY = """
query userPublicProfile($username: String!) {
  matchedUser(username: $username) {
    username
    profile {
      ranking
      userAvatar
      realName
      reputation
      websites
      countryName
      skillTags
      company
      school
      starRating
      aboutMe
      solutionCount
      postViewCount
    }
    submitStats {
      acSubmissionNum {
        difficulty
        count
        submissions
      }
      totalSubmissionNum {
        difficulty
        count
        submissions
      }
    }
  }
}
"""
