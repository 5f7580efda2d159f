"""Frame-updated user-interface widgets driven by mouse and key input."""