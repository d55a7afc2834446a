# Export all types
from .common import ApiOptionsType, ClientOptionsType, RequestOptionsType
from .user_api_key import GenerateUserApiKeyParamsType, UserApiKeyLinkType, UserApiKeyPayloadType
from .upload import UploadType
from .user import BasicUserType, UserType, UserInfoType
from .post import (
    PostType, CreatePostRequestType, UpdatePostRequestType,
    LatestPostsResponseType, CookedResponseType
)
from .topic import (
    BasicTopicType, SuggestedTopicType, PostStreamType, TopicType, TopicListType,
    LatestTopicsResponseType, TopicPostsResponseType, TopicStatusResponseType,
    InviteToTopicResponseType
)
from .notification import NotificationType, NotificationsType, MarkReadResponseType
from .chat import ChatMessageType
