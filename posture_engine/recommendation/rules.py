POSITIVE_SUGGESTION = "Your posture looks good; keep up your current habits."

FALLBACK_SUGGESTIONS = [
    "Retake the photo in bright, even lighting",
    "Make sure your whole body, head to feet, is visible in the frame",
    "Wear fitted clothing so joints are clearly visible"
]

CHECK_RULES = {
    "shoulder_level": {
        "label": "Shoulder asymmetry",
        "descriptions": {
            "normal": "Shoulders are level",
            "warning": "Slightly uneven shoulders",
            "danger": "Clearly uneven shoulders"
        },
        "suggestions": {
            "warning": "Mild shoulder imbalance: stretch both shoulders daily and carry bags on both sides",
            "danger": "Marked shoulder imbalance: start corrective shoulder training and consider a professional check-up"
        },
        "base_actions": [
            "Keep shoulders relaxed and level",
            "Carry backpacks on both shoulders",
            "Perform shoulder rolls every 30 minutes"
        ]
    },
    "pelvic_tilt": {
        "label": "Pelvic tilt",
        "descriptions": {
            "normal": "Pelvis is level",
            "warning": "Slight pelvic tilt",
            "danger": "Clear pelvic tilt"
        },
        "suggestions": {
            "warning": "Slight pelvic tilt: stand with weight on both feet and avoid crossing your legs",
            "danger": "Clear pelvic tilt: begin pelvic alignment exercises such as glute bridges and hip stretches"
        },
        "base_actions": [
            "Distribute weight evenly on both legs",
            "Avoid sitting with crossed legs",
            "Strengthen glutes and core"
        ]
    },
    "head_tilt": {
        "label": "Head tilt",
        "descriptions": {
            "normal": "Head is upright",
            "warning": "Slight head tilt",
            "danger": "Clear head tilt"
        },
        "suggestions": {
            "warning": "Slight head tilt: keep screens centered in front of you",
            "danger": "Clear head tilt: practice keeping your head upright and stretch the side of the neck"
        },
        "base_actions": [
            "Keep head centered over shoulders",
            "Avoid tilting head to one side",
            "Position screen directly in front"
        ]
    },
    "spine_alignment": {
        "label": "Spinal alignment",
        "descriptions": {
            "normal": "Trunk midline is aligned",
            "warning": "Slight lateral shift of the trunk",
            "danger": "Marked lateral shift of the trunk"
        },
        "suggestions": {
            "warning": "Slight trunk shift: keep your body symmetrical when sitting and standing",
            "danger": "Marked trunk shift: have your spine checked by a professional to rule out scoliosis"
        },
        "base_actions": [
            "Sit upright with back support",
            "Engage core muscles gently",
            "Avoid leaning to one side"
        ]
    },
    "knee_symmetry": {
        "label": "Knee symmetry",
        "descriptions": {
            "normal": "Knees are level",
            "warning": "Uneven knee height"
        },
        "suggestions": {
            "warning": "Uneven knee height: check leg alignment and balance single-leg exercises on both sides"
        },
        "base_actions": [
            "Train both legs equally",
            "Avoid standing on one leg for long periods",
            "Check footwear for uneven wear"
        ]
    },
    "forward_head": {
        "label": "Forward head posture",
        "descriptions": {
            "normal": "Head sits over the shoulders",
            "warning": "Slight forward head posture",
            "danger": "Clear forward head posture"
        },
        "suggestions": {
            "warning": "Slight forward head: hold phones and screens at eye level",
            "danger": "Clear forward head: do daily chin tucks and neck strengthening exercises"
        },
        "base_actions": [
            "Raise screen to eye level",
            "Perform chin tuck exercises",
            "Maintain neutral head position"
        ]
    },
    "rounded_shoulders": {
        "label": "Rounded shoulders / kyphosis",
        "descriptions": {
            "normal": "Upper back curve is normal",
            "warning": "Slight rounding of the upper back",
            "danger": "Clear rounded shoulders or kyphosis"
        },
        "suggestions": {
            "warning": "Slight rounding: keep your chest open and shoulders back",
            "danger": "Rounded shoulders: strengthen the upper back with rows and wall angels"
        },
        "base_actions": [
            "Stretch the chest muscles daily",
            "Strengthen upper back muscles",
            "Avoid slouching over desks"
        ]
    },
    "pelvic_tilt_sagittal": {
        "label": "Anterior/posterior pelvic tilt",
        "descriptions": {
            "normal": "Pelvis position is normal",
            "anterior": "Anterior pelvic tilt tendency",
            "posterior": "Posterior pelvic tilt tendency"
        },
        "suggestions": {
            "anterior": "Anterior pelvic tilt: stretch the hip flexors and strengthen the abdominals",
            "posterior": "Posterior pelvic tilt: stretch the hamstrings and avoid slumped sitting"
        },
        "base_actions": [
            "Stretch hip flexors and hamstrings",
            "Strengthen core and glutes",
            "Keep a neutral lower back when sitting"
        ]
    },
    "detection_quality": {
        "label": "Detection quality",
        "descriptions": {
            "warning": "Body keypoints could not be detected reliably; this result is a low-confidence estimate"
        },
        "suggestions": {},
        "base_actions": list(FALLBACK_SUGGESTIONS)
    }
}
