"""
Use case: Get a tier-personalized feed.

Input: a verified Credential and GetPersonalizedFeedQuery (feed_type)
Output: PersonalizedFeedResult
Side effects: None.
Failure cases: None. Unknown feed types return an empty feed.
"""

from app.application.identity.dtos import GetPersonalizedFeedQuery, PersonalizedFeedResult
from app.domain.identity.entities import Credential
from app.domain.identity.feed_composer import FeedComposer


class GetPersonalizedFeedUseCase:
    """Builds the feed matching the credential's tier."""

    def __init__(self, composer: FeedComposer) -> None:
        self._composer = composer

    def execute(
        self, credential: Credential, query: GetPersonalizedFeedQuery
    ) -> PersonalizedFeedResult:
        payload = self._composer.personalized_feed(credential.tier, query.feed_type)
        return PersonalizedFeedResult(
            feed_type=payload.feed_type,
            identity_tier=payload.identity_tier.value,
            tier_name=payload.tier_name,
            data=[dict(item) for item in payload.data],
        )
