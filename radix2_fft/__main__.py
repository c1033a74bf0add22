from radix2_fft.verify import main

raise SystemExit(main())
