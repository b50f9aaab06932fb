"""
Dishka DI Container Setup.

Guidelines:
- Registers services, security helpers and command/query handlers
- Maps abstract ports to concrete implementations
- Manages lifecycle (APP = singleton, REQUEST = per-request)

Repositories are NOT registered here. They come from a second provider:
- PrismaProvider (setup/ioc/persistence.py) in production
- an in-memory provider in the test suite

Flow:
  Container → provides → PrismaConversationRepository → to → FindOrCreateConversationHandler
                                    ↓
                            uses ConversationRepository interface
"""

from typing import AsyncIterable

import httpx
from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from farmer_network.application.commands.conversations import (
    FindOrCreateConversationHandler,
)
from farmer_network.application.commands.messages import AppendMessageHandler
from farmer_network.application.commands.posts import (
    CreateCommentHandler,
    CreatePostHandler,
    DeletePostHandler,
)
from farmer_network.application.commands.resources import (
    CreateResourceHandler,
    DeleteResourceHandler,
    UpdateResourceHandler,
)
from farmer_network.application.commands.users import (
    FollowUserHandler,
    LoginUserHandler,
    RegisterUserHandler,
    UnfollowUserHandler,
    UpdateProfileHandler,
)
from farmer_network.application.queries.conversations import ListConversationsHandler
from farmer_network.application.queries.messages import ListMessagesHandler
from farmer_network.application.queries.posts import (
    ListCommentsHandler,
    ListPostsHandler,
)
from farmer_network.application.queries.resources import ListResourcesHandler
from farmer_network.application.queries.users import GetUserHandler, ListUsersHandler
from farmer_network.application.queries.weather import GetHourlyForecastHandler
from farmer_network.application.services.avatar_resolver import AvatarResolver
from farmer_network.config.settings import Config
from farmer_network.domain.ports.repositories import (
    CommentRepository,
    ConversationRepository,
    MessageRepository,
    PostRepository,
    ResourceRepository,
    UserRepository,
)
from farmer_network.domain.ports.weather_client import WeatherClient
from farmer_network.infrastructure.external import OpenWeatherClient
from farmer_network.infrastructure.security import PasswordHasher, TokenService
from farmer_network.infrastructure.storage import FileStorageService


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers everything except the repositories.
    """

    # ==================== SECURITY ====================

    @provide(scope=Scope.APP)
    def get_password_hasher(self) -> PasswordHasher:
        return PasswordHasher()

    @provide(scope=Scope.APP)
    def get_token_service(self) -> TokenService:
        """
        Provide TokenService (singleton).

        - Reads SERVICE_AUTH_SECRET / ISSUER / AUDIENCE from Config
        """
        return TokenService()

    # ==================== STORAGE ====================

    @provide(scope=Scope.APP)
    def get_file_storage(self) -> FileStorageService:
        return FileStorageService()

    # ==================== EXTERNAL APIS ====================

    @provide(scope=Scope.APP)
    async def get_http_client(self) -> AsyncIterable[httpx.AsyncClient]:
        """
        Provide the shared outbound HTTP client.

        - Generator provider: closed when the container is closed
        """
        async with httpx.AsyncClient(timeout=Config.WEATHER_TIMEOUT_SECONDS) as client:
            yield client

    @provide(scope=Scope.APP)
    def get_weather_client(self, http_client: httpx.AsyncClient) -> WeatherClient:
        return OpenWeatherClient(http_client)

    # ==================== SERVICES ====================

    @provide(scope=Scope.REQUEST)
    def get_avatar_resolver(self, user_repository: UserRepository) -> AvatarResolver:
        return AvatarResolver(user_repository)

    # ==================== CONVERSATION HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_find_or_create_conversation_handler(
        self,
        conversation_repository: ConversationRepository,
        avatar_resolver: AvatarResolver,
    ) -> FindOrCreateConversationHandler:
        """
        Provide FindOrCreateConversationHandler.

        - Parameters ask for abstract ports
        - Dishka resolves them from whichever repository provider is installed
        """
        return FindOrCreateConversationHandler(conversation_repository, avatar_resolver)

    @provide(scope=Scope.REQUEST)
    def get_list_conversations_handler(
        self,
        conversation_repository: ConversationRepository,
        avatar_resolver: AvatarResolver,
    ) -> ListConversationsHandler:
        return ListConversationsHandler(conversation_repository, avatar_resolver)

    @provide(scope=Scope.REQUEST)
    def get_append_message_handler(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
        avatar_resolver: AvatarResolver,
    ) -> AppendMessageHandler:
        return AppendMessageHandler(
            conv_repo=conversation_repository,
            msg_repo=message_repository,
            avatar_resolver=avatar_resolver,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_messages_handler(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
    ) -> ListMessagesHandler:
        return ListMessagesHandler(
            conv_repo=conversation_repository,
            msg_repo=message_repository,
        )

    # ==================== USER HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_register_user_handler(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> RegisterUserHandler:
        return RegisterUserHandler(user_repository, password_hasher, token_service)

    @provide(scope=Scope.REQUEST)
    def get_login_user_handler(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> LoginUserHandler:
        return LoginUserHandler(user_repository, password_hasher, token_service)

    @provide(scope=Scope.REQUEST)
    def get_update_profile_handler(
        self, user_repository: UserRepository
    ) -> UpdateProfileHandler:
        return UpdateProfileHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_follow_user_handler(self, user_repository: UserRepository) -> FollowUserHandler:
        return FollowUserHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_unfollow_user_handler(
        self, user_repository: UserRepository
    ) -> UnfollowUserHandler:
        return UnfollowUserHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_users_handler(self, user_repository: UserRepository) -> ListUsersHandler:
        return ListUsersHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_user_handler(self, user_repository: UserRepository) -> GetUserHandler:
        return GetUserHandler(user_repository)

    # ==================== POST HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_post_handler(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
        file_storage: FileStorageService,
    ) -> CreatePostHandler:
        return CreatePostHandler(post_repository, user_repository, file_storage)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_handler(
        self,
        post_repository: PostRepository,
        file_storage: FileStorageService,
    ) -> DeletePostHandler:
        return DeletePostHandler(post_repository, file_storage)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_handler(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
    ) -> ListPostsHandler:
        return ListPostsHandler(post_repository, user_repository)

    @provide(scope=Scope.REQUEST)
    def get_create_comment_handler(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        user_repository: UserRepository,
    ) -> CreateCommentHandler:
        return CreateCommentHandler(comment_repository, post_repository, user_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_comments_handler(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        user_repository: UserRepository,
    ) -> ListCommentsHandler:
        return ListCommentsHandler(comment_repository, post_repository, user_repository)

    # ==================== RESOURCE HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_resource_handler(
        self, resource_repository: ResourceRepository
    ) -> CreateResourceHandler:
        return CreateResourceHandler(resource_repository)

    @provide(scope=Scope.REQUEST)
    def get_update_resource_handler(
        self, resource_repository: ResourceRepository
    ) -> UpdateResourceHandler:
        return UpdateResourceHandler(resource_repository)

    @provide(scope=Scope.REQUEST)
    def get_delete_resource_handler(
        self, resource_repository: ResourceRepository
    ) -> DeleteResourceHandler:
        return DeleteResourceHandler(resource_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_resources_handler(
        self, resource_repository: ResourceRepository
    ) -> ListResourcesHandler:
        return ListResourcesHandler(resource_repository)

    # ==================== WEATHER ====================

    @provide(scope=Scope.REQUEST)
    def get_hourly_forecast_handler(
        self, weather_client: WeatherClient
    ) -> GetHourlyForecastHandler:
        return GetHourlyForecastHandler(weather_client)


def create_container(*repository_providers: Provider) -> AsyncContainer:
    """
    Create and configure the DI container.

    - With no arguments the Prisma-backed provider is used
    - Call this ONCE at app startup
    """
    if not repository_providers:
        # Imported here: the Prisma client only exists after `prisma generate`
        from farmer_network.setup.ioc.persistence import PrismaProvider

        repository_providers = (PrismaProvider(),)
    return make_async_container(AppProvider(), *repository_providers)
