from .donation_goal import DonationGoal, GoalProgress, MONTHS
from .donation_request import DonationRequest
from .gallery_image import GalleryImage
